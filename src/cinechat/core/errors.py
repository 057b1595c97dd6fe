"""Exceptions raised by CineChat."""

from enum import Enum
from typing import Optional


class CineChatError(Exception):
    """Base class for CineChat errors."""


class SchemaErrorKind(Enum):
    MISSING_FIELD = "MissingField"
    INVALID_TYPE = "InvalidType"


class SchemaError(CineChatError):
    """Extraction payload does not match the movie record shape."""

    def __init__(self, kind: SchemaErrorKind, field: str, index: Optional[int] = None, detail: str = ""):
        self.kind = kind
        self.field = field
        self.index = index
        self.detail = detail
        location = f"record {index}" if index is not None else "payload"
        message = f"{kind.value}: '{field}' in {location}"
        if detail:
            message += f" ({detail})"
        super().__init__(message)


class ExtractionFailure(CineChatError):
    """The extraction service call failed or returned unusable output."""


class AnalysisInProgress(CineChatError):
    """A second run was started while one is still pending."""


__all__ = [
    "CineChatError",
    "SchemaErrorKind",
    "SchemaError",
    "ExtractionFailure",
    "AnalysisInProgress",
]
