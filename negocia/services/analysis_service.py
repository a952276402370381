"""
Analysis Relay Service - NegocIA
negocia/services/analysis_service.py

Stateless per-call pipeline: verify caller, parse the request, summarize
the rows, build the prompt and forward it to the inference service.
"""
import logging
from typing import Any, Optional

from pydantic import ValidationError

from negocia.core.exceptions import MalformedRequestException
from negocia.models.analysis import AnalysisRequest, AnalysisResponse
from negocia.models.enumerations import Category
from negocia.services.auth_service import CallerVerifier
from negocia.services.csv_summarizer import summarize_csv
from negocia.services.llm_client import NarrativeGenerator
from negocia.services.prompt_builder import DEFAULT_SAMPLE_ROWS, build_prompt

logger = logging.getLogger(__name__)


class AnalysisRelay:

    def __init__(
        self,
        verifier: CallerVerifier,
        generator: NarrativeGenerator,
        sample_rows: int = DEFAULT_SAMPLE_ROWS,
    ):
        self.verifier = verifier
        self.generator = generator
        self.sample_rows = sample_rows

    @staticmethod
    def parse_request(body: Any) -> AnalysisRequest:
        if not isinstance(body, dict):
            raise MalformedRequestException("Request body must be a JSON object")
        try:
            return AnalysisRequest.model_validate(body)
        except ValidationError as e:
            fields = ", ".join(".".join(str(p) for p in err["loc"]) for err in e.errors())
            raise MalformedRequestException(f"Invalid request body: {fields}") from e

    async def handle(self, token: Optional[str], body: Any) -> AnalysisResponse:
        """Authenticate first, then read the body, so bad payloads never bypass auth."""
        identity = await self.verifier.verify_caller(token)
        request = self.parse_request(body)
        logger.info(
            f"Processing {request.category} data for company: {request.company_name} "
            f"(user {identity.user_id})"
        )
        return await self.analyze(request)

    async def analyze(self, request: AnalysisRequest) -> AnalysisResponse:
        category = Category.parse(request.category)
        summary = summarize_csv(request.raw_text)
        prompt = build_prompt(category, summary, self.sample_rows)

        analysis = await self.generator.generate_narrative(prompt)

        logger.info(
            f"[{category.value}] analysis complete: {summary.total_records} records, "
            f"{summary.columns_analyzed} columns"
        )
        return AnalysisResponse(
            analysis=analysis,
            metrics=summary.to_metrics(),
            area=category,
        )
