# tests/conftest.py

"""
Pytest Fixtures - Shared test doubles and data for the relay and dashboard.

The identity service and the AI gateway are replaced by in-memory fakes,
so no test makes a network call.
"""

import pytest
from fastapi.testclient import TestClient

from negocia.core.dependencies import get_caller_verifier, get_narrative_generator
from negocia.core.exceptions import InferenceServiceException, UnauthorizedException
from negocia.main import app
from negocia.services.auth_service import CallerIdentity, CallerVerifier
from negocia.services.llm_client import NarrativeGenerator


VALID_TOKEN = "valid-session-token"


# =============================================================================
# FAKE COLLABORATORS
# =============================================================================

class FakeVerifier(CallerVerifier):
    """Accepts exactly one token."""

    def __init__(self, valid_token: str = VALID_TOKEN):
        self.valid_token = valid_token
        self.calls = []

    async def verify_caller(self, token):
        self.calls.append(token)
        if token != self.valid_token:
            raise UnauthorizedException()
        return CallerIdentity(user_id="user-1", email="owner@example.com")


class FakeGenerator(NarrativeGenerator):
    """Records prompts and returns a canned narrative, or fails on demand."""

    def __init__(self, narrative: str = "## Análisis\nVentas estables.", fail: bool = False):
        self.narrative = narrative
        self.fail = fail
        self.prompts = []

    async def generate_narrative(self, prompt):
        self.prompts.append(prompt)
        if self.fail:
            raise InferenceServiceException("Error al analizar con IA", status_code=502)
        return self.narrative


# =============================================================================
# FASTAPI TEST CLIENT FIXTURES
# =============================================================================

@pytest.fixture
def verifier():
    return FakeVerifier()


@pytest.fixture
def generator():
    return FakeGenerator()


@pytest.fixture
def client(verifier, generator):
    """TestClient with both external collaborators overridden."""
    app.dependency_overrides[get_caller_verifier] = lambda: verifier
    app.dependency_overrides[get_narrative_generator] = lambda: generator
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers():
    return {"Authorization": f"Bearer {VALID_TOKEN}"}


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================

@pytest.fixture
def sales_csv():
    """Two January sales rows."""
    return "date,amount\n2024-01-01,100\n2024-01-31,200"


@pytest.fixture
def valid_analysis_body(sales_csv):
    return {
        "csvData": sales_csv,
        "fileType": "ventas",
        "companyName": "Acme SA",
    }
