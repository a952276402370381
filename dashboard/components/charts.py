"""
components/charts.py — Plotly chart builders for the results view.
"""

from typing import List

import pandas as pd
import plotly.graph_objects as go

from negocia.models.analysis import AnalysisResult
from negocia.models.enumerations import Category

CATEGORY_COLORS = {
    Category.SALES: "#2563eb",        # blue
    Category.PURCHASES: "#16a34a",    # green
    Category.INVENTORY: "#9333ea",    # purple
    Category.RECEIVABLES: "#ea580c",  # orange
    Category.PAYABLES: "#dc2626",     # red
}


def results_frame(results: List[AnalysisResult]) -> pd.DataFrame:
    return pd.DataFrame([
        {
            "Área": r.category.label,
            "Registros": r.metrics.total_records,
            "Columnas": r.metrics.columns_analyzed,
            "Periodo": r.metrics.date_range_label,
            "color": CATEGORY_COLORS[r.category],
        }
        for r in results
    ])


def records_bar_chart(results: List[AnalysisResult]) -> go.Figure:
    """Horizontal bar chart: records analyzed per area."""
    df = results_frame(results)
    fig = go.Figure()
    if df.empty:
        return fig

    fig.add_trace(go.Bar(
        x=df["Registros"], y=df["Área"], orientation="h",
        marker_color=df["color"], text=df["Registros"],
        textposition="outside", textfont=dict(size=14, color="#1e293b"),
        customdata=df[["Columnas", "Periodo"]],
        hovertemplate="%{y}: %{x} registros<br>%{customdata[0]} columnas<br>%{customdata[1]}<extra></extra>",
    ))
    fig.update_layout(
        title="Registros analizados por área",
        xaxis=dict(title="Registros"),
        yaxis=dict(autorange="reversed"),
        height=80 + 50 * len(df), margin=dict(l=140, r=40, t=50, b=40),
        showlegend=False, plot_bgcolor="white",
    )
    return fig
