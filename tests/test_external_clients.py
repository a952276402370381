# tests/test_external_clients.py

"""
External Client Tests - identity-service verifier and chat-completion client.

Outbound HTTP is served by httpx.MockTransport handlers.
"""

import asyncio
import json

import httpx
import pytest

from negocia.config import Settings
from negocia.core.exceptions import InferenceServiceException, UnauthorizedException
from negocia.services.auth_service import SupabaseCallerVerifier, extract_bearer_token
from negocia.services.llm_client import ChatCompletionClient
from negocia.services.prompt_builder import ChatPrompt


def make_settings(**overrides) -> Settings:
    values = {
        "SUPABASE_URL": "https://demo.supabase.co",
        "SUPABASE_ANON_KEY": "anon-key",
        "AI_GATEWAY_API_KEY": "gateway-key",
        "AI_GATEWAY_URL": "https://gateway.test/v1/chat/completions",
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


PROMPT = ChatPrompt(system="instrucciones", user="datos")


# =============================================================================
# BEARER TOKEN PARSING
# =============================================================================

class TestExtractBearerToken:

    @pytest.mark.parametrize("header,expected", [
        ("Bearer abc", "abc"),
        ("bearer  abc ", "abc"),
        ("Basic abc", None),
        ("Bearer", None),
        ("", None),
        (None, None),
    ])
    def test_extract(self, header, expected):
        assert extract_bearer_token(header) == expected


# =============================================================================
# CALLER VERIFIER
# =============================================================================

class TestSupabaseCallerVerifier:

    def test_valid_session(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["url"] = str(request.url)
            seen["auth"] = request.headers["authorization"]
            seen["apikey"] = request.headers["apikey"]
            return httpx.Response(200, json={"id": "u-42", "email": "a@b.c"})

        verifier = SupabaseCallerVerifier(make_settings(), transport=httpx.MockTransport(handler))
        identity = asyncio.run(verifier.verify_caller("tok"))

        assert identity.user_id == "u-42"
        assert identity.email == "a@b.c"
        assert seen == {
            "url": "https://demo.supabase.co/auth/v1/user",
            "auth": "Bearer tok",
            "apikey": "anon-key",
        }

    def test_missing_token_makes_no_call(self):
        def handler(request):
            raise AssertionError("identity service should not be called")

        verifier = SupabaseCallerVerifier(make_settings(), transport=httpx.MockTransport(handler))
        with pytest.raises(UnauthorizedException):
            asyncio.run(verifier.verify_caller(None))

    @pytest.mark.parametrize("response", [
        httpx.Response(401, json={"msg": "invalid JWT"}),
        httpx.Response(200, json={}),
        httpx.Response(200, text="not json"),
    ])
    def test_rejected_sessions(self, response):
        verifier = SupabaseCallerVerifier(
            make_settings(), transport=httpx.MockTransport(lambda request: response)
        )
        with pytest.raises(UnauthorizedException):
            asyncio.run(verifier.verify_caller("tok"))

    def test_unreachable_service(self):
        def handler(request):
            raise httpx.ConnectError("refused", request=request)

        verifier = SupabaseCallerVerifier(make_settings(), transport=httpx.MockTransport(handler))
        with pytest.raises(UnauthorizedException):
            asyncio.run(verifier.verify_caller("tok"))

    def test_unconfigured_service(self):
        verifier = SupabaseCallerVerifier(make_settings(SUPABASE_URL=None))
        with pytest.raises(UnauthorizedException):
            asyncio.run(verifier.verify_caller("tok"))


# =============================================================================
# CHAT COMPLETION CLIENT
# =============================================================================

class TestChatCompletionClient:

    def test_returns_first_choice_content(self):
        seen = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen["auth"] = request.headers["authorization"]
            seen["body"] = json.loads(request.content)
            return httpx.Response(200, json={
                "choices": [
                    {"message": {"role": "assistant", "content": "Narrativa"}},
                    {"message": {"role": "assistant", "content": "otra"}},
                ]
            })

        client = ChatCompletionClient(make_settings(), transport=httpx.MockTransport(handler))
        assert asyncio.run(client.generate_narrative(PROMPT)) == "Narrativa"

        assert seen["auth"] == "Bearer gateway-key"
        assert seen["body"] == {
            "model": "google/gemini-2.5-flash",
            "messages": [
                {"role": "system", "content": "instrucciones"},
                {"role": "user", "content": "datos"},
            ],
        }

    @pytest.mark.parametrize("status", [400, 402, 429, 500, 503])
    def test_non_success_status(self, status):
        calls = []

        def handler(request):
            calls.append(request)
            return httpx.Response(status, text="gateway says no")

        client = ChatCompletionClient(make_settings(), transport=httpx.MockTransport(handler))
        with pytest.raises(InferenceServiceException) as exc:
            asyncio.run(client.generate_narrative(PROMPT))

        assert exc.value.status_code == status
        assert exc.value.message == "Error al analizar con IA"
        assert len(calls) == 1

    @pytest.mark.parametrize("body", [
        {},
        {"choices": []},
        {"choices": [{"message": {}}]},
        {"choices": [{"message": {"content": None}}]},
        ["not", "a", "dict"],
    ])
    def test_malformed_body(self, body):
        client = ChatCompletionClient(
            make_settings(), transport=httpx.MockTransport(lambda request: httpx.Response(200, json=body))
        )
        with pytest.raises(InferenceServiceException):
            asyncio.run(client.generate_narrative(PROMPT))

    def test_transport_error(self):
        def handler(request):
            raise httpx.ReadTimeout("slow", request=request)

        client = ChatCompletionClient(make_settings(), transport=httpx.MockTransport(handler))
        with pytest.raises(InferenceServiceException):
            asyncio.run(client.generate_narrative(PROMPT))

    def test_missing_api_key(self, monkeypatch):
        monkeypatch.delenv("AI_GATEWAY_API_KEY", raising=False)
        monkeypatch.delenv("LOVABLE_API_KEY", raising=False)
        client = ChatCompletionClient(make_settings(AI_GATEWAY_API_KEY=None))
        with pytest.raises(InferenceServiceException):
            asyncio.run(client.generate_narrative(PROMPT))
