from dataclasses import replace

import numpy as np
import pandas as pd

from pricing.engine import compute
from pricing.values import parse_input, to_number


def entries_frame(entries):
    return pd.DataFrame(
        [{"id": e.id, "nome": e.name, "percentual": float(to_number(e.percent_value))} for e in entries],
        columns=["id", "nome", "percentual"],
    )


def price_composition(fixed_cost, entries, result):
    """
    Quanto do preço de venda vai para o custo do produto e para cada custo
    variável (percentual aplicado sobre o preço).
    """
    preco = float(result.selling_price)
    rows = [{"componente": "Custo do Produto", "valor": round(float(to_number(fixed_cost)), 2)}]
    for e in entries:
        rows.append({
            "componente": e.name or f"Custo {e.id}",
            "valor": round(preco * float(to_number(e.percent_value)) / 100.0, 2),
        })
    return pd.DataFrame(rows, columns=["componente", "valor"])


def price_sensitivity(fixed_cost, entries, entry_id, percents):
    """
    Preço de venda para cada percentual alternativo de um dos custos,
    mantendo os demais. Onde a soma atinge 100% o preço fica NaN.
    """
    entries = tuple(entries)
    if not any(e.id == entry_id for e in entries):
        raise KeyError(entry_id)
    percents = np.asarray(percents, dtype=float)
    precos = np.full(percents.shape, np.nan)
    for i, p in enumerate(percents):
        trial = [e if e.id != entry_id else _with_percent(e, p) for e in entries]
        res = compute(fixed_cost, trial)
        if res.ok:
            precos[i] = float(res.selling_price)
    return pd.DataFrame({"percentual": percents, "preco_venda": precos})


def _with_percent(entry, p):
    return replace(entry, percent_value=parse_input(round(float(p), 6)))
