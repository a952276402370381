"""
Relay Client - NegocIA
negocia/ui/relay_client.py

Dashboard-side caller of the analysis relay.
"""
import logging
from typing import Any, Dict

import requests

from negocia.core.exceptions import RelayCallException
from negocia.models.analysis import AnalysisRequest, AnalysisResult

logger = logging.getLogger(__name__)


def safe_json(resp: requests.Response) -> Dict[str, Any]:
    try:
        body = resp.json()
    except ValueError:
        return {"_error": resp.text, "_status": resp.status_code}
    return body if isinstance(body, dict) else {"_error": resp.text, "_status": resp.status_code}


class RelayClient:

    def __init__(self, url: str, access_token: str, timeout_s: float = 180.0):
        self.url = url
        self.access_token = access_token
        self.timeout_s = timeout_s

    def analyze(self, request: AnalysisRequest) -> AnalysisResult:
        headers = {"Authorization": f"Bearer {self.access_token}"}
        try:
            resp = requests.post(
                self.url,
                json=request.model_dump(by_alias=True),
                headers=headers,
                timeout=self.timeout_s,
            )
        except requests.RequestException as e:
            raise RelayCallException(f"No se pudo contactar el servicio de análisis: {e}") from e

        body = safe_json(resp)
        if resp.status_code >= 400 or not body.get("success"):
            message = body.get("error") or body.get("_error") or f"HTTP {resp.status_code}"
            logger.warning(f"Relay call for {request.category} failed ({resp.status_code}): {message}")
            raise RelayCallException(message, status_code=resp.status_code)

        try:
            return AnalysisResult.from_response(body)
        except ValueError as e:
            raise RelayCallException("Respuesta del servicio de análisis con formato inesperado") from e
