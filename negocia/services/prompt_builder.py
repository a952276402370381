"""
Prompt Builder - NegocIA
negocia/services/prompt_builder.py

Maps a category to its fixed instruction template and renders the data
excerpt sent as the user message.
"""
from dataclasses import dataclass
from typing import Dict, List

from negocia.models.enumerations import Category
from negocia.services.csv_summarizer import CsvSummary

DEFAULT_SAMPLE_ROWS = 10


PROMPT_TEMPLATES: Dict[Category, str] = {
    Category.SALES: """Analiza estos datos de ventas y genera:
1. Métricas clave (ventas totales, ticket promedio, productos más vendidos)
2. Tendencias y patrones estacionales
3. 3 recomendaciones estratégicas para aumentar ventas""",

    Category.PURCHASES: """Analiza estos datos de compras y genera:
1. Métricas clave (gasto total, proveedores principales, frecuencia de compra)
2. Eficiencia en costos y oportunidades de ahorro
3. 3 recomendaciones para optimizar compras""",

    Category.INVENTORY: """Analiza estos datos de inventario y genera:
1. Métricas clave (rotación, productos lentos/rápidos, nivel de stock)
2. Productos con riesgo de sobrestock o falta de stock
3. 3 recomendaciones para optimizar inventario""",

    Category.RECEIVABLES: """Analiza estos datos de cuentas por cobrar y genera:
1. Métricas clave (cartera total, días promedio de cobro, cartera vencida)
2. Clientes con mayor mora y riesgos
3. 3 recomendaciones para mejorar cobranza""",

    Category.PAYABLES: """Analiza estos datos de cuentas por pagar y genera:
1. Métricas clave (total a pagar, días promedio de pago, próximos vencimientos)
2. Proyección de flujo de caja
3. 3 recomendaciones para optimizar pagos""",
}


@dataclass(frozen=True)
class ChatPrompt:
    system: str
    user: str

    def as_messages(self) -> List[Dict[str, str]]:
        return [
            {"role": "system", "content": self.system},
            {"role": "user", "content": self.user},
        ]


def render_data_excerpt(category: Category, summary: CsvSummary, sample_rows: int = DEFAULT_SAMPLE_ROWS) -> str:
    """Column names, the first sample rows and basic statistics. Rows are not truncated in width."""
    sample = "\n".join(", ".join(row) for row in summary.sample(sample_rows))
    return (
        f"Datos de {category.value} ({summary.total_records} registros):\n"
        f"Columnas: {', '.join(summary.headers)}\n"
        f"\n"
        f"Primeras {sample_rows} filas de ejemplo:\n"
        f"{sample}\n"
        f"\n"
        f"Estadísticas básicas:\n"
        f"- Total de registros: {summary.total_records}\n"
        f"- Rango de fechas: {summary.date_range_label}\n"
    )


def build_prompt(category: Category, summary: CsvSummary, sample_rows: int = DEFAULT_SAMPLE_ROWS) -> ChatPrompt:
    return ChatPrompt(
        system=PROMPT_TEMPLATES[category],
        user=render_data_excerpt(category, summary, sample_rows),
    )
