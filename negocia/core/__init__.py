"""
Core Package - NegocIA
negocia/core/__init__.py

Core infrastructure: dependencies, exceptions, logging.
"""

from negocia.core.exceptions import (
    AnalysisBatchException,
    AnalysisException,
    AnalysisValidationException,
    FileReadException,
    InferenceServiceException,
    MalformedRequestException,
    RelayCallException,
    UnauthorizedException,
    UnknownCategoryException,
)

__all__ = [
    "AnalysisBatchException",
    "AnalysisException",
    "AnalysisValidationException",
    "FileReadException",
    "InferenceServiceException",
    "MalformedRequestException",
    "RelayCallException",
    "UnauthorizedException",
    "UnknownCategoryException",
]
