"""Validation of movie payloads returned by the extraction service."""

import json
import logging
import re
from typing import Any, Dict, List, Optional

from .errors import SchemaError, SchemaErrorKind, ExtractionFailure
from .models import MovieRecord, Sentiment

logger = logging.getLogger(__name__)

REQUIRED_TEXT_FIELDS = ("title", "language", "country", "summary")

_INTEGER_RE = re.compile(r"^[+-]?\d+$")


def _strip_code_fences(s: str) -> str:
    s = s.strip()
    return re.sub(r"^```(?:json)?|```$", "", s, flags=re.IGNORECASE|re.MULTILINE).strip()


def _require_text(raw: Dict[str, Any], name: str, index: int) -> str:
    value = raw.get(name)
    if value is None:
        raise SchemaError(SchemaErrorKind.MISSING_FIELD, name, index)
    if not isinstance(value, str):
        raise SchemaError(SchemaErrorKind.INVALID_TYPE, name, index, f"expected string, got {type(value).__name__}")
    value = value.strip()
    if not value:
        raise SchemaError(SchemaErrorKind.MISSING_FIELD, name, index, "empty value")
    return value


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    value = str(value).strip()
    return value or None


def _coerce_int(raw: Dict[str, Any], name: str, index: int) -> Optional[int]:
    """Coerce an optional integer field, accepting numeric strings."""
    value = raw.get(name)
    if value is None:
        return None
    # bool is an int subclass but never a valid count or year
    if isinstance(value, bool):
        raise SchemaError(SchemaErrorKind.INVALID_TYPE, name, index, "expected integer, got bool")
    if isinstance(value, int):
        return value
    if isinstance(value, float) and value.is_integer():
        return int(value)
    if isinstance(value, str) and _INTEGER_RE.match(value.strip()):
        return int(value.strip())
    raise SchemaError(SchemaErrorKind.INVALID_TYPE, name, index, f"expected integer, got {value!r}")


def _parse_sentiment(value: Any, index: int) -> Optional[Sentiment]:
    if value is None:
        return None
    try:
        return Sentiment(str(value).strip().lower())
    except ValueError:
        logger.warning(f"Ignoring unrecognized sentiment {value!r} in record {index}")
        return None


def _parse_record(raw: Any, index: int) -> MovieRecord:
    if not isinstance(raw, dict):
        raise SchemaError(SchemaErrorKind.INVALID_TYPE, "<record>", index, f"expected object, got {type(raw).__name__}")

    title = _require_text(raw, "title", index)

    genres = raw.get("genres")
    if genres is None:
        raise SchemaError(SchemaErrorKind.MISSING_FIELD, "genres", index)
    if not isinstance(genres, (list, tuple)):
        raise SchemaError(SchemaErrorKind.INVALID_TYPE, "genres", index, f"expected list, got {type(genres).__name__}")

    language = _require_text(raw, "language", index)
    country = _require_text(raw, "country", index)
    summary = _require_text(raw, "summary", index)

    year = _coerce_int(raw, "year", index)
    mention_count = _coerce_int(raw, "mentionCount", index)
    if mention_count is not None and mention_count < 1:
        raise SchemaError(SchemaErrorKind.INVALID_TYPE, "mentionCount", index, f"must be at least 1, got {mention_count}")

    return MovieRecord(
        title=title,
        year=year,
        director=_optional_text(raw.get("director")),
        genres=[str(g) for g in genres if g is not None],
        language=language,
        country=country,
        summary=summary,
        recommender=_optional_text(raw.get("recommender")),
        sentiment=_parse_sentiment(raw.get("sentiment"), index),
        mention_count=mention_count,
    )


def validate_records(payload: Any) -> List[MovieRecord]:
    """Validate a decoded payload into movie records, preserving order.

    Raises SchemaError for the first offending record and field. No partial
    result is returned.
    """
    if not isinstance(payload, list):
        raise SchemaError(SchemaErrorKind.INVALID_TYPE, "<root>", None, f"expected array, got {type(payload).__name__}")
    return [_parse_record(raw, index) for index, raw in enumerate(payload)]


def parse_extraction_payload(text: str) -> List[MovieRecord]:
    """Decode raw model output and validate it."""
    if not text or not text.strip():
        return []
    try:
        payload = json.loads(_strip_code_fences(text))
    except json.JSONDecodeError as e:
        raise ExtractionFailure(f"Extraction service returned non-JSON output: {text[:200]}...") from e
    return validate_records(payload)
