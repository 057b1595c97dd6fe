"""Core modules for CineChat."""

from .models import *
from .config import settings
from .errors import *
from .schema import validate_records, parse_extraction_payload
from .aggregation import *
from .filtering import filter_records, distinct_genres

__all__ = [
    "settings",
    "MovieRecord",
    "Sentiment",
    "DerivedStat",
    "AnalysisResult",
    "DashboardStats",
    "SchemaError",
    "ExtractionFailure",
    "validate_records",
    "parse_extraction_payload",
    "build_dashboard",
    "filter_records",
    "distinct_genres",
]
