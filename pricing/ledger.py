import logging
from dataclasses import dataclass, replace

from pricing.values import EMPTY, Empty, Numeric, parse_input, to_number, _d

logger = logging.getLogger(__name__)

DEFAULT_VARIABLE_COSTS = (
    ("ICMS", 17),
    ("PIS", 0.65),
    ("COFINS", 3),
    ("Comissão", 2),
    ("Marketing", 3),
    ("Desp. Financeiras", 2.38),
    ("Lucro", 20),
)

FIELDS = ("name", "percent_value")


@dataclass(frozen=True)
class VariableCostEntry:
    id: int
    name: str
    percent_value: Empty | Numeric = EMPTY

    @property
    def percent(self):
        return to_number(self.percent_value)


class CostLedger:
    """
    Lista ordenada de custos variáveis (%), cada um com id inteiro estável.

    A ordem de inserção só importa para exibição; o cálculo apenas soma.
    """

    def __init__(self, seed=DEFAULT_VARIABLE_COSTS):
        self._entries = []
        for nome, valor in seed:
            self._entries.append(VariableCostEntry(len(self._entries) + 1, nome, parse_input(valor)))

    @classmethod
    def empty(cls):
        return cls(seed=())

    def _next_id(self):
        if not self._entries:
            return 1
        return max(e.id for e in self._entries) + 1

    def add(self):
        entry = VariableCostEntry(self._next_id(), "", Numeric(_d(0)))
        self._entries.append(entry)
        logger.debug("Custo variável adicionado: id=%s", entry.id)
        return entry

    def remove(self, entry_id):
        before = len(self._entries)
        self._entries = [e for e in self._entries if e.id != entry_id]
        if len(self._entries) == before:
            logger.debug("Remoção ignorada, id inexistente: %s", entry_id)

    def update(self, entry_id, field, value):
        if field not in FIELDS:
            raise ValueError(f"Campo desconhecido: {field!r}")
        if field == "percent_value":
            value = parse_input(value)
        else:
            value = "" if value is None else str(value)
        for i, e in enumerate(self._entries):
            if e.id == entry_id:
                self._entries[i] = replace(e, **{field: value})
                return
        logger.debug("Atualização ignorada, id inexistente: %s", entry_id)

    def get(self, entry_id):
        for e in self._entries:
            if e.id == entry_id:
                return e
        return None

    def entries(self):
        return tuple(self._entries)

    def __len__(self):
        return len(self._entries)

    def __iter__(self):
        return iter(self.entries())
