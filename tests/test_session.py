"""
test_session.py — estado da tela e expiração do erro

O relógio é injetado, então a expiração é testada sem esperar.
"""

from decimal import Decimal

import pytest

from pricing.engine import PricingError, PricingResult
from pricing.ledger import CostLedger
from pricing.session import CalculatorSession
from pricing.values import as_display


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def calc(clock):
    return CalculatorSession(clock=clock, error_seconds=4.0)


def _break_markup(calc):
    calc.ledger.update(7, "percent_value", 80)


class TestCalculate:

    def test_idle_until_calculated(self, calc):
        assert calc.result is None
        assert calc.error is None
        assert calc.calculated_with is None

    def test_default_result(self, calc):
        out = calc.calculate()
        assert isinstance(out, PricingResult)
        assert calc.result is out
        assert calc.error is None
        assert calc.result.selling_price == Decimal("96.21")

    def test_no_recalculation_on_edit(self, calc):
        calc.calculate()
        calc.update_entry(7, "percent_value", 30)
        assert calc.result.selling_price == Decimal("96.21")

    def test_snapshot_of_inputs(self, calc):
        calc.calculate()
        fixed, entries = calc.calculated_with
        calc.add_entry()
        assert len(entries) == 7
        assert fixed == calc.fixed_cost

    def test_error_replaces_result(self, calc):
        calc.calculate()
        _break_markup(calc)
        out = calc.calculate()
        assert isinstance(out, PricingError)
        assert calc.result is None
        assert calc.error is out

    def test_result_replaces_error(self, calc):
        _break_markup(calc)
        calc.calculate()
        calc.ledger.update(7, "percent_value", 20)
        calc.calculate()
        assert calc.error is None
        assert calc.result is not None

    def test_fixed_cost_empty_while_editing(self, calc):
        calc.set_fixed_cost("")
        assert calc.calculate().selling_price == Decimal("0.00")
        calc.set_fixed_cost("100")
        assert calc.calculate().selling_price == Decimal("192.42")

    def test_custom_ledger(self, clock):
        calc = CalculatorSession(ledger=CostLedger.empty(), fixed_cost=200, clock=clock)
        assert str(calc.calculate().selling_price) == "200.00"

    def test_default_fixed_cost_displays_as_50(self, calc):
        assert as_display(calc.fixed_cost) == "50"


class TestErrorLifetime:

    def test_error_expires_after_four_seconds(self, calc, clock):
        _break_markup(calc)
        calc.calculate()
        clock.now = 3.9
        assert calc.error is not None
        assert calc.error_remaining() == pytest.approx(0.1)
        clock.now = 4.0
        assert calc.error is None
        assert calc.error_remaining() == 0.0

    def test_new_calculation_restarts_deadline(self, calc, clock):
        _break_markup(calc)
        calc.calculate()
        clock.now = 3.0
        calc.calculate()
        clock.now = 5.0
        assert calc.error is not None
        clock.now = 7.0
        assert calc.error is None

    def test_mutation_dismisses_error(self, calc, clock):
        _break_markup(calc)
        calc.calculate()
        calc.update_entry(7, "percent_value", 20)
        assert calc.error is None
        assert calc.error_remaining() == 0.0

    def test_mutation_keeps_result(self, calc):
        calc.calculate()
        calc.add_entry()
        calc.remove_entry(1)
        calc.set_fixed_cost(10)
        assert calc.result is not None

    def test_result_never_expires(self, calc, clock):
        calc.calculate()
        clock.now = 1000.0
        assert calc.result is not None
