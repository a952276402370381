"""
Analysis Router - NegocIA
negocia/routers/analysis.py

HTTP surface of the analysis relay. Every failure, including a missing
session, is reported as ``500 {success: false, error}``.
"""
import json
import logging
from typing import Optional

from fastapi import APIRouter, Depends, Header, Request, Response, status
from fastapi.responses import JSONResponse

from negocia.core.dependencies import get_analysis_relay
from negocia.core.exceptions import AnalysisException
from negocia.models.analysis import AnalysisResponse, ErrorResponse
from negocia.services.analysis_service import AnalysisRelay
from negocia.services.auth_service import extract_bearer_token

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/functions/v1", tags=["Analysis"])

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "authorization, x-client-info, apikey, content-type",
}

UNEXPECTED_ERROR_MESSAGE = "Error desconocido"


def error_response(message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=ErrorResponse(error=message).model_dump(),
        headers=CORS_HEADERS,
    )


async def read_json_body(request: Request):
    """Raw JSON body, or None when it is missing or not JSON."""
    raw = await request.body()
    if not raw:
        return None
    try:
        return json.loads(raw)
    except ValueError:
        return None


@router.options("/analyze-business-data", include_in_schema=False)
async def analyze_preflight() -> Response:
    return Response(status_code=status.HTTP_200_OK, headers=CORS_HEADERS)


@router.post(
    "/analyze-business-data",
    response_model=AnalysisResponse,
    responses={
        200: {"description": "Narrative and metrics for one uploaded file"},
        500: {"model": ErrorResponse, "description": "Any failure, including Unauthorized"},
    },
    summary="Analyze one business-data file",
    description="Summarizes CSV text for one category and asks the AI gateway for a narrative analysis.",
)
async def analyze_business_data(
    request: Request,
    authorization: Optional[str] = Header(default=None),
    relay: AnalysisRelay = Depends(get_analysis_relay),
):
    try:
        token = extract_bearer_token(authorization)
        body = await read_json_body(request)
        result = await relay.handle(token, body)
    except AnalysisException as e:
        logger.error(f"Error in analyze-business-data: {e.message}")
        return error_response(e.message)
    except Exception:
        logger.exception("Unexpected error in analyze-business-data")
        return error_response(UNEXPECTED_ERROR_MESSAGE)

    return JSONResponse(
        status_code=status.HTTP_200_OK,
        content=result.model_dump(mode="json", by_alias=True),
        headers=CORS_HEADERS,
    )
