"""
components/results.py — Per-area result cards.
"""

from typing import List

import streamlit as st

from negocia.models.analysis import AnalysisResult


def render_result_card(result: AnalysisResult) -> None:
    with st.container(border=True):
        st.subheader(f"{result.category.icon} Análisis de {result.category.label}")
        c1, c2 = st.columns(2)
        c1.metric("Registros", result.metrics.total_records)
        c2.metric("Columnas", result.metrics.columns_analyzed)
        st.caption(f"**Periodo:** {result.metrics.date_range_label}")
        st.markdown(result.narrative)


def render_results(results: List[AnalysisResult]) -> None:
    if not results:
        return

    st.markdown("## Resultados del Análisis")
    st.caption("Análisis generado por IA con recomendaciones estratégicas")

    cols = st.columns(2)
    for i, result in enumerate(results):
        with cols[i % 2]:
            render_result_card(result)
