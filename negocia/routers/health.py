"""
Health Check Router - NegocIA
negocia/routers/health.py

Reports whether the relay's external collaborators are configured.
No outbound calls are made.
"""
from datetime import datetime, timezone
from typing import Dict

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from negocia.config import get_settings

router = APIRouter(tags=["Health"])


class HealthResponse(BaseModel):
    status: str
    timestamp: datetime
    version: str
    dependencies: Dict[str, str]


def check_identity_service() -> str:
    settings = get_settings()
    missing = []
    if not settings.SUPABASE_URL:
        missing.append("SUPABASE_URL")
    if settings.SUPABASE_ANON_KEY is None:
        missing.append("SUPABASE_ANON_KEY")
    if missing:
        return f"unconfigured: Missing env vars: {', '.join(missing)}"
    return f"configured ({settings.SUPABASE_URL})"


def check_ai_gateway() -> str:
    settings = get_settings()
    if settings.AI_GATEWAY_API_KEY is None:
        return "unconfigured: Missing env vars: AI_GATEWAY_API_KEY"
    return f"configured (model: {settings.AI_MODEL})"


@router.get(
    "/health",
    response_model=HealthResponse,
    responses={
        200: {"description": "All collaborators configured"},
        503: {"description": "One or more collaborators unconfigured"},
    },
    summary="Health check",
)
async def health_check():
    dependencies = {
        "identity_service": check_identity_service(),
        "ai_gateway": check_ai_gateway(),
    }
    all_configured = all(v.startswith("configured") for v in dependencies.values())

    response = HealthResponse(
        status="healthy" if all_configured else "degraded",
        timestamp=datetime.now(timezone.utc),
        version=get_settings().APP_VERSION,
        dependencies=dependencies,
    )

    if all_configured:
        return response
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content=response.model_dump(mode="json"),
    )
