import logging
from dataclasses import dataclass
from decimal import Decimal, ROUND_HALF_UP, localcontext

from pricing.values import to_number, _d

logger = logging.getLogger(__name__)

INVALID_MARKUP = "InvalidMarkupError"
MENSAGEM_MARKUP_INVALIDO = "A soma dos custos variáveis não pode ser igual ou superior a 100%."

DUAS_CASAS = _d("0.01")
QUATRO_CASAS = _d("0.0001")
CEM = _d(100)


def _q(value, casas):
    with localcontext() as ctx:
        ctx.prec = max(ctx.prec, value.adjusted() + 8)
        q = value.quantize(casas, rounding=ROUND_HALF_UP)
    # "-0.00" vira "0.00"
    return q.copy_abs() if q.is_zero() else q


@dataclass(frozen=True)
class PricingResult:
    total_variable_percent: Decimal
    markup_divisor: Decimal
    selling_price: Decimal

    ok = True

    def as_text(self):
        return {
            "total_variable_percent": str(self.total_variable_percent),
            "markup_divisor": str(self.markup_divisor),
            "selling_price": str(self.selling_price),
        }


@dataclass(frozen=True)
class PricingError:
    total_variable_percent: Decimal
    message: str = MENSAGEM_MARKUP_INVALIDO
    kind: str = INVALID_MARKUP

    ok = False


def total_variable_percent(entries):
    return sum((to_number(e.percent_value) for e in entries), _d(0))


def compute(fixed_cost, entries):
    """
    Calcula o preço de venda pelo markup divisor.

        markup = 1 - soma_percentuais / 100
        preco  = custo_fixo / markup

    Valores vazios ou não numéricos contam como 0. Se a soma dos percentuais
    for >= 100 o markup seria nulo ou negativo, e o retorno é um PricingError
    (não uma exceção).
    """
    total = total_variable_percent(entries)
    if total >= CEM:
        logger.warning("Markup inválido: soma dos custos variáveis = %s%%", total)
        return PricingError(total_variable_percent=_q(total, DUAS_CASAS))
    markup = _d(1) - total / CEM
    preco = to_number(fixed_cost) / markup
    return PricingResult(
        total_variable_percent=_q(total, DUAS_CASAS),
        markup_divisor=_q(markup, QUATRO_CASAS),
        selling_price=_q(preco, DUAS_CASAS),
    )
