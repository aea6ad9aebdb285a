import time

from pricing.config import CUSTO_FIXO_PADRAO, ERRO_SEGUNDOS_PADRAO
from pricing.engine import PricingError, compute
from pricing.ledger import CostLedger
from pricing.values import parse_input


class CalculatorSession:
    """
    Estado da tela: um ledger, um custo fixo e no máximo um resultado ou erro.

    O erro expira depois de `error_seconds`; a expiração é só um prazo
    verificado na leitura, nada bloqueia nem dorme.
    """

    def __init__(self, ledger=None, fixed_cost=CUSTO_FIXO_PADRAO, clock=time.monotonic, error_seconds=ERRO_SEGUNDOS_PADRAO):
        self.ledger = ledger if ledger is not None else CostLedger()
        self.fixed_cost = parse_input(fixed_cost)
        self._clock = clock
        self._error_seconds = error_seconds
        self._outcome = None
        self._error_deadline = None
        # custo fixo e custos usados no último cálculo
        self.calculated_with = None

    def _dismiss_error(self):
        if isinstance(self._outcome, PricingError):
            self._outcome = None
        self._error_deadline = None

    def add_entry(self):
        self._dismiss_error()
        return self.ledger.add()

    def remove_entry(self, entry_id):
        self._dismiss_error()
        self.ledger.remove(entry_id)

    def update_entry(self, entry_id, field, value):
        self._dismiss_error()
        self.ledger.update(entry_id, field, value)

    def set_fixed_cost(self, value):
        self._dismiss_error()
        self.fixed_cost = parse_input(value)

    def calculate(self):
        entries = self.ledger.entries()
        outcome = compute(self.fixed_cost, entries)
        self._outcome = outcome
        self.calculated_with = (self.fixed_cost, entries)
        if isinstance(outcome, PricingError):
            self._error_deadline = self._clock() + self._error_seconds
        else:
            self._error_deadline = None
        return outcome

    def _expire(self):
        if self._error_deadline is not None and self._clock() >= self._error_deadline:
            self._outcome = None
            self._error_deadline = None

    @property
    def result(self):
        self._expire()
        if self._outcome is not None and self._outcome.ok:
            return self._outcome
        return None

    @property
    def error(self):
        self._expire()
        if isinstance(self._outcome, PricingError):
            return self._outcome
        return None

    def error_remaining(self):
        if self.error is None:
            return 0.0
        return max(0.0, self._error_deadline - self._clock())
