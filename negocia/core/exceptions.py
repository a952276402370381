"""
Custom Exceptions - NegocIA
negocia/core/exceptions.py

Exception classes for the analysis relay and the dashboard driver.
"""


class AnalysisException(Exception):
    """Base exception for the upload-to-analysis pipeline."""

    def __init__(self, message: str = "Analysis failed"):
        self.message = message
        super().__init__(message)


class UnauthorizedException(AnalysisException):
    """Caller has no valid session."""

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class MalformedRequestException(AnalysisException):
    """Relay request body could not be read."""

    pass


class UnknownCategoryException(AnalysisException):
    """Category tag does not map to an analysis template."""

    def __init__(self, tag: str):
        self.tag = tag
        super().__init__(f"Unknown analysis category: {tag!r}")


class InferenceServiceException(AnalysisException):
    """External chat-completion call failed or returned an unusable body."""

    def __init__(self, message: str = "Error al analizar con IA", status_code: int = None):
        self.status_code = status_code
        super().__init__(message)


class FileReadException(AnalysisException):
    """Uploaded file could not be turned into text."""

    def __init__(self, filename: str, reason: str):
        self.filename = filename
        self.reason = reason
        super().__init__(f"Could not read {filename}: {reason}")


class AnalysisValidationException(AnalysisException):
    """Dashboard inputs are incomplete; nothing was sent."""

    pass


class RelayCallException(AnalysisException):
    """Dashboard call to the relay failed."""

    def __init__(self, message: str, status_code: int = None):
        self.status_code = status_code
        super().__init__(message)


class AnalysisBatchException(AnalysisException):
    """A per-file step failed and the whole batch was abandoned."""

    def __init__(self, category, cause: Exception):
        self.category = category
        self.cause = cause
        super().__init__(f"Analysis aborted at {category.label}: {cause}")
