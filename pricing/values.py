from decimal import Decimal, InvalidOperation
from dataclasses import dataclass


class Empty:
    """Campo em edição sem valor numérico (vazio ou texto parcial)."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self):
        return "EMPTY"

    def __bool__(self):
        return False


EMPTY = Empty()

# expoentes acima disso esgotariam a precisão do quantize
MAX_EXPOENTE = 10**5


@dataclass(frozen=True)
class Numeric:
    value: Decimal


def _d(x):
    return Decimal(str(x))


def parse_input(raw):
    if isinstance(raw, (Empty, Numeric)):
        return raw
    if raw is None or isinstance(raw, bool):
        return EMPTY
    if isinstance(raw, str):
        raw = raw.strip()
        if raw == "":
            return EMPTY
    try:
        n = raw if isinstance(raw, Decimal) else _d(raw)
    except (InvalidOperation, ValueError):
        return EMPTY
    if not n.is_finite() or abs(n.adjusted()) > MAX_EXPOENTE:
        return EMPTY
    return Numeric(n)


def to_number(value):
    """Resolve um valor bruto ou já parseado para Decimal; vazio vale 0."""
    v = parse_input(value)
    if isinstance(v, Numeric):
        return v.value
    return _d(0)


def as_display(value):
    v = parse_input(value)
    if isinstance(v, Numeric):
        return str(v.value)
    return ""
