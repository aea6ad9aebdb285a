import streamlit as st
import plotly.express as px
import numpy as np
from pricing.config import load_settings, configure_logging
from pricing.session import CalculatorSession
from pricing.analysis import entries_frame, price_composition, price_sensitivity
from pricing.values import as_display

settings = load_settings()
configure_logging(settings)

st.set_page_config(page_title="Calculadora de Preço de Venda", layout="centered")

if "calc" not in st.session_state:
    st.session_state.calc = CalculatorSession(fixed_cost=settings.custo_fixo, error_seconds=settings.erro_segundos)
calc = st.session_state.calc


def on_fixed_cost():
    calc.set_fixed_cost(st.session_state.custo_fixo)


def on_name(entry_id):
    calc.update_entry(entry_id, "name", st.session_state[f"nome_{entry_id}"])


def on_value(entry_id):
    calc.update_entry(entry_id, "percent_value", st.session_state[f"valor_{entry_id}"])


def on_remove(entry_id):
    calc.remove_entry(entry_id)
    # o id pode voltar a ser usado por um custo novo
    st.session_state.pop(f"nome_{entry_id}", None)
    st.session_state.pop(f"valor_{entry_id}", None)


@st.fragment(run_every=1)
def error_popup():
    err = calc.error
    if err:
        st.error(err.message)
        st.caption(f"Soma atual: {err.total_variable_percent}%")


st.title("Calculadora de Preço de Venda")

if "custo_fixo" not in st.session_state:
    st.session_state.custo_fixo = as_display(calc.fixed_cost)
st.text_input("Custo do Produto (R$)", key="custo_fixo", on_change=on_fixed_cost, placeholder="Ex: 50.00")

st.subheader("Custos Variáveis e Lucro (%)")
for cost in calc.ledger.entries():
    st.session_state.setdefault(f"nome_{cost.id}", cost.name)
    st.session_state.setdefault(f"valor_{cost.id}", as_display(cost.percent_value))
    c1, c2, c3 = st.columns([3, 2, 1])
    with c1:
        st.text_input("Nome do Custo", key=f"nome_{cost.id}", on_change=on_name, args=(cost.id,), placeholder="Nome do Custo", label_visibility="collapsed")
    with c2:
        st.text_input("%", key=f"valor_{cost.id}", on_change=on_value, args=(cost.id,), placeholder="%", label_visibility="collapsed")
    with c3:
        st.button("Remover", key=f"remover_{cost.id}", on_click=on_remove, args=(cost.id,))

col_a, col_b = st.columns(2)
with col_a:
    st.button("Adicionar Custo", on_click=calc.add_entry)
with col_b:
    st.button("Calcular Preço de Venda", type="primary", on_click=calc.calculate)

error_popup()

res = calc.result
if res:
    fixed_cost, entries = calc.calculated_with
    st.subheader("Resultados")
    m1, m2, m3 = st.columns(3)
    m1.metric("Soma dos Custos Variáveis", f"{res.total_variable_percent}%")
    m2.metric("Markup Divisor", str(res.markup_divisor))
    m3.metric("Preço de Venda Sugerido", f"R$ {res.selling_price}")

    with st.expander("Custos considerados"):
        st.dataframe(entries_frame(entries), hide_index=True)

    comp = price_composition(fixed_cost, entries, res)
    fig1 = px.pie(comp[comp["valor"] > 0], values="valor", names="componente", title="Composição do Preço de Venda")
    st.plotly_chart(fig1, width='stretch')

    if entries:
        alvo = st.selectbox("Sensibilidade do preço ao custo", entries, index=len(entries) - 1, format_func=lambda e: e.name or f"Custo {e.id}")
        nome_alvo = alvo.name or f"Custo {alvo.id}"
        percents = np.round(np.linspace(0, 60, 61), 2)
        sens = price_sensitivity(fixed_cost, entries, alvo.id, percents)
        fig2 = px.line(sens.dropna(), x="percentual", y="preco_venda", title=f"Sensibilidade: {nome_alvo} (%) x Preço de Venda")
        fig2.update_xaxes(title=f"{nome_alvo} (%)")
        fig2.update_yaxes(title="Preço de Venda (R$)")
        st.plotly_chart(fig2, width='stretch')
        st.download_button("Exportar custos (CSV)", entries_frame(entries).to_csv(index=False).encode("utf-8"), "custos_variaveis.csv")
