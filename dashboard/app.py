# dashboard/app.py
# NegocIA — business-data upload and AI analysis dashboard

from __future__ import annotations

import os

import streamlit as st
from dotenv import load_dotenv

from negocia.config import get_settings
from negocia.core.exceptions import AnalysisBatchException, AnalysisValidationException
from negocia.core.logging_config import configure_logging
from negocia.models.enumerations import Category
from negocia.ui.relay_client import RelayClient
from negocia.ui.runner import run_analysis
from negocia.ui.uploads import UploadedFile, UploadSet

from components.charts import records_bar_chart
from components.results import render_results

load_dotenv()

# =====================================================================
# Page config (must be first Streamlit call)
# =====================================================================

st.set_page_config(
    page_title="NegocIA — Análisis Inteligente",
    layout="wide",
    page_icon="🧠",
)

settings = get_settings()
configure_logging(settings.LOG_LEVEL)


def _secret(key: str, default: str = "") -> str:
    # Streamlit secrets first, then env vars
    try:
        return st.secrets[key]
    except Exception:
        return os.getenv(key, default)


# =====================================================================
# Session state
# =====================================================================

if "uploads" not in st.session_state:
    st.session_state["uploads"] = UploadSet()
if "results" not in st.session_state:
    st.session_state["results"] = []

uploads: UploadSet = st.session_state["uploads"]

# =====================================================================
# Sidebar — connection
# =====================================================================

with st.sidebar:
    st.header("Conexión")
    relay_url = st.text_input("URL del servicio de análisis", value=_secret("RELAY_URL", settings.RELAY_URL))
    access_token = st.text_input(
        "Token de acceso",
        value=_secret("NEGOCIA_ACCESS_TOKEN"),
        type="password",
        help="Token de sesión emitido por el servicio de autenticación.",
    )

# =====================================================================
# Header
# =====================================================================

st.title("🧠 NegocIA")
st.caption("Análisis Inteligente para tu Empresa ✨ Con IA")

# =====================================================================
# Upload section
# =====================================================================

st.markdown("## Carga tus datos empresariales")
st.markdown("Sube archivos CSV o Excel de diferentes áreas de tu negocio")

company_name = st.text_input("Nombre de la empresa", key="company_name")


def _accept_upload(category: Category, widget_file) -> None:
    if widget_file is None:
        return
    candidate = UploadedFile(name=widget_file.name, data=widget_file.getvalue())
    outcome = uploads.offer(category, candidate, settings.max_upload_bytes)
    if outcome is not None:
        st.toast(outcome.message, icon="✅" if outcome.accepted else "⚠️")


zones = st.columns(len(Category))
for zone, category in zip(zones, Category):
    with zone:
        st.markdown(f"### {category.icon}")
        widget_file = st.file_uploader(
            category.label,
            type=["csv", "xlsx", "xls"],
            key=f"upload_{category.value}",
            help=f"CSV, XLSX, XLS (máx. {settings.MAX_UPLOAD_MB}MB)",
        )
        _accept_upload(category, widget_file)
        slot = uploads.get(category)
        if slot is not None:
            st.caption(f"✅ {slot.name}")
        else:
            st.caption("Arrastra o haz clic para subir")

# =====================================================================
# Analyze action
# =====================================================================

if st.button("📈 Analizar Negocio", type="primary", use_container_width=True):
    client = RelayClient(relay_url, access_token, timeout_s=settings.RELAY_TIMEOUT_SECONDS)
    progress = st.progress(0.0, text="Analizando datos con IA...")

    def _on_progress(index: int, total: int, category: Category) -> None:
        progress.progress(index / total, text=f"Analizando {category.label} ({index + 1}/{total})...")

    try:
        results = run_analysis(uploads, company_name, client, on_progress=_on_progress)
    except AnalysisValidationException as e:
        progress.empty()
        st.error(e.message)
    except AnalysisBatchException as e:
        progress.empty()
        st.session_state["results"] = []
        st.error(f"Error al analizar los datos: {e.cause}")
    else:
        progress.progress(1.0, text="Análisis completado")
        st.session_state["results"] = results
        st.success(f"¡Análisis completado! {len(results)} áreas procesadas")

# =====================================================================
# Results
# =====================================================================

results = st.session_state["results"]
if results:
    st.divider()
    st.plotly_chart(records_bar_chart(results), use_container_width=True, key="records_bar")
    render_results(results)

st.divider()
st.caption("© 2025 NegocIA. Análisis empresarial potenciado por IA.")
