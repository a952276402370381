"""
Dependencies - NegocIA
negocia/core/dependencies.py

FastAPI dependency injection for the relay's external collaborators.
"""

from functools import lru_cache

from fastapi import Depends

from negocia.config import get_settings
from negocia.services.analysis_service import AnalysisRelay
from negocia.services.auth_service import CallerVerifier, SupabaseCallerVerifier
from negocia.services.llm_client import ChatCompletionClient, NarrativeGenerator


@lru_cache()
def get_caller_verifier() -> CallerVerifier:
    """Get cached identity-service verifier."""
    return SupabaseCallerVerifier(get_settings())


@lru_cache()
def get_narrative_generator() -> NarrativeGenerator:
    """Get cached chat-completion client."""
    return ChatCompletionClient(get_settings())


def get_analysis_relay(
    verifier: CallerVerifier = Depends(get_caller_verifier),
    generator: NarrativeGenerator = Depends(get_narrative_generator),
) -> AnalysisRelay:
    """Per-request relay over the provided collaborators."""
    return AnalysisRelay(
        verifier=verifier,
        generator=generator,
        sample_rows=get_settings().SAMPLE_ROWS,
    )
