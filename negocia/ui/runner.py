"""
Analysis Driver - NegocIA
negocia/ui/runner.py

Runs the "Analyze" action: validates inputs, then calls the relay once
per uploaded file, strictly one after another. The first failure aborts
the batch and discards results gathered so far.
"""
import logging
from typing import Callable, List, Optional

from negocia.core.exceptions import AnalysisBatchException, AnalysisValidationException
from negocia.models.analysis import AnalysisRequest, AnalysisResult
from negocia.models.enumerations import Category
from negocia.services.file_reader import read_file_text
from negocia.ui.relay_client import RelayClient
from negocia.ui.uploads import UploadSet

logger = logging.getLogger(__name__)

NO_FILES_MESSAGE = "Por favor sube al menos un archivo para analizar"
NO_COMPANY_MESSAGE = "Por favor ingresa el nombre de tu empresa"

ProgressCallback = Callable[[int, int, Category], None]


def validate_analysis_inputs(uploads: UploadSet, company_name: str) -> Optional[str]:
    """Notification text when the action cannot run, else None."""
    if uploads.count == 0:
        return NO_FILES_MESSAGE
    if not (company_name or "").strip():
        return NO_COMPANY_MESSAGE
    return None


def run_analysis(
    uploads: UploadSet,
    company_name: str,
    client: RelayClient,
    on_progress: ProgressCallback = None,
) -> List[AnalysisResult]:
    message = validate_analysis_inputs(uploads, company_name)
    if message:
        raise AnalysisValidationException(message)

    pending = uploads.uploaded()
    results: List[AnalysisResult] = []
    for index, (category, file) in enumerate(pending):
        if on_progress:
            on_progress(index, len(pending), category)
        try:
            text = read_file_text(file.name, file.data)
            request = AnalysisRequest(
                raw_text=text,
                category=category.value,
                company_name=company_name.strip(),
            )
            results.append(client.analyze(request))
        except Exception as e:
            logger.error(f"Analysis aborted at {category.value} ({file.name}): {e}")
            raise AnalysisBatchException(category, e) from e

    logger.info(f"Analysis complete: {len(results)} area(s) processed")
    return results
