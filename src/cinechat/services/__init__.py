"""Services for CineChat."""

from .llm import ExtractionServiceFactory, OpenAIExtractionService, StaticExtractionService
from .analyzer import AnalysisSession, AnalysisStatus

__all__ = [
    "ExtractionServiceFactory",
    "OpenAIExtractionService",
    "StaticExtractionService",
    "AnalysisSession",
    "AnalysisStatus",
]
