"""CineChat - AI-powered movie club chat log analyzer."""

__version__ = "1.0.0"
__author__ = "CineChat Team"

from .core.models import *
from .core.config import settings
from .services.llm import ExtractionServiceFactory
from .services.analyzer import AnalysisSession

__all__ = [
    "settings",
    "ExtractionServiceFactory",
    "AnalysisSession",
]
