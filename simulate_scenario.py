from pricing.config import load_settings, configure_logging
from pricing.engine import compute
from pricing.ledger import CostLedger


def _show(outcome):
    if outcome.ok:
        txt = outcome.as_text()
        print(f"Soma dos Custos Variáveis: {txt['total_variable_percent']}%")
        print(f"Markup Divisor: {txt['markup_divisor']}")
        print(f"Preço de Venda Sugerido: R$ {txt['selling_price']}")
    else:
        print(f"ERRO ({outcome.kind}): {outcome.message} [soma={outcome.total_variable_percent}%]")


def run_simulation():
    print("=== Cenários da Calculadora de Markup ===")

    print("\nA. Custos padrão, custo do produto R$ 50")
    ledger = CostLedger()
    _show(compute(50, ledger.entries()))

    print("\nB. Custos somando exatamente 100%")
    ledger = CostLedger(seed=(("ICMS", 60), ("Lucro", 40)))
    _show(compute(50, ledger.entries()))

    print("\nC. Custos somando 100,5%")
    ledger = CostLedger(seed=(("ICMS", 60), ("Lucro", 40.5)))
    _show(compute(50, ledger.entries()))

    print("\nD. Sem custos variáveis, custo do produto R$ 200")
    _show(compute(200, CostLedger.empty().entries()))

    print("\nE. Adicionar e remover o mesmo custo")
    ledger = CostLedger()
    antes = ledger.entries()
    novo = ledger.add()
    print(f"Adicionado id {novo.id} ({len(ledger)} custos)")
    ledger.remove(novo.id)
    print(f"Removido id {novo.id} ({len(ledger)} custos), igual ao inicial: {ledger.entries() == antes}")

    print("\n=== Simulação Concluída ===")


if __name__ == "__main__":
    configure_logging(load_settings())
    run_simulation()
