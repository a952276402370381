"""
Narrative Generation - NegocIA
negocia/services/llm_client.py

Sends a two-message chat payload to an OpenAI-compatible
chat-completion endpoint and returns the first completion's text.
One call per analysis, no retry.
"""
import logging

import httpx

from negocia.config import Settings, get_settings
from negocia.core.exceptions import InferenceServiceException
from negocia.services.prompt_builder import ChatPrompt

logger = logging.getLogger(__name__)

GENERIC_FAILURE_MESSAGE = "Error al analizar con IA"


class NarrativeGenerator:
    """generate_narrative(prompt) -> str, or raises InferenceServiceException."""

    async def generate_narrative(self, prompt: ChatPrompt) -> str:
        raise NotImplementedError


class ChatCompletionClient(NarrativeGenerator):

    def __init__(self, settings: Settings = None, transport: httpx.AsyncBaseTransport = None):
        self.settings = settings or get_settings()
        self.transport = transport

    def build_payload(self, prompt: ChatPrompt) -> dict:
        return {
            "model": self.settings.AI_MODEL,
            "messages": prompt.as_messages(),
        }

    async def generate_narrative(self, prompt: ChatPrompt) -> str:
        api_key = self.settings.AI_GATEWAY_API_KEY
        if api_key is None:
            logger.error("AI gateway API key not configured")
            raise InferenceServiceException("AI gateway API key not configured")

        headers = {
            "Authorization": f"Bearer {api_key.get_secret_value()}",
            "Content-Type": "application/json",
        }
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.AI_TIMEOUT_SECONDS,
                transport=self.transport,
            ) as client:
                resp = await client.post(
                    self.settings.AI_GATEWAY_URL,
                    json=self.build_payload(prompt),
                    headers=headers,
                )
        except httpx.HTTPError as e:
            logger.error(f"AI API request failed: {e}")
            raise InferenceServiceException(GENERIC_FAILURE_MESSAGE) from e

        if not resp.is_success:
            logger.error(f"AI API error: {resp.status_code} {resp.text[:500]}")
            raise InferenceServiceException(GENERIC_FAILURE_MESSAGE, status_code=resp.status_code)

        try:
            body = resp.json()
            content = body["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logger.error(f"AI API returned an unexpected body: {resp.text[:500]}")
            raise InferenceServiceException("Respuesta de IA con formato inesperado") from e

        if not isinstance(content, str):
            raise InferenceServiceException("Respuesta de IA con formato inesperado")

        return content
