"""Tests for movie payload validation."""

import pytest

from cinechat.core.errors import SchemaError, SchemaErrorKind, ExtractionFailure
from cinechat.core.models import Sentiment
from cinechat.core.schema import validate_records, parse_extraction_payload


def _raw(**overrides):
    record = {
        "title": "Dune",
        "year": 2021,
        "genres": ["Sci-Fi", "Drama"],
        "language": "English",
        "country": "USA",
        "summary": "A noble family fights for control of a desert planet.",
    }
    record.update(overrides)
    return record


class TestValidateRecords:
    """Required fields, coercion and normalization."""

    def test_valid_payload_preserves_order(self):
        records = validate_records([_raw(title="Dune"), _raw(title="Arrival"), _raw(title="Alien")])
        assert [r.title for r in records] == ["Dune", "Arrival", "Alien"]

    def test_empty_array_is_valid(self):
        assert validate_records([]) == []

    def test_missing_title_reports_index_and_field(self):
        with pytest.raises(SchemaError) as exc:
            validate_records([{"year": 2020}])
        assert exc.value.kind == SchemaErrorKind.MISSING_FIELD
        assert exc.value.index == 0
        assert exc.value.field == "title"

    def test_first_offending_record_is_reported(self):
        payload = [_raw(), _raw(), _raw(country=None), _raw(summary=None)]
        with pytest.raises(SchemaError) as exc:
            validate_records(payload)
        assert exc.value.index == 2
        assert exc.value.field == "country"

    @pytest.mark.parametrize("field", ["title", "genres", "language", "country", "summary"])
    def test_each_required_field(self, field):
        raw = _raw()
        del raw[field]
        with pytest.raises(SchemaError) as exc:
            validate_records([raw])
        assert exc.value.kind == SchemaErrorKind.MISSING_FIELD
        assert exc.value.field == field

    def test_blank_title_is_missing(self):
        with pytest.raises(SchemaError) as exc:
            validate_records([_raw(title="   ")])
        assert exc.value.kind == SchemaErrorKind.MISSING_FIELD

    def test_title_is_trimmed(self):
        assert validate_records([_raw(title="  Heat ")])[0].title == "Heat"

    def test_genres_must_be_a_list(self):
        with pytest.raises(SchemaError) as exc:
            validate_records([_raw(genres="Drama")])
        assert exc.value.kind == SchemaErrorKind.INVALID_TYPE
        assert exc.value.field == "genres"

    def test_empty_genres_allowed_and_duplicates_kept(self):
        assert validate_records([_raw(genres=[])])[0].genres == []
        assert validate_records([_raw(genres=["Drama", "Drama"])])[0].genres == ["Drama", "Drama"]

    def test_numeric_strings_are_coerced(self):
        record = validate_records([_raw(year="1999", mentionCount="4")])[0]
        assert record.year == 1999
        assert record.mention_count == 4

    def test_non_numeric_year_rejected(self):
        with pytest.raises(SchemaError) as exc:
            validate_records([_raw(year="nineties")])
        assert exc.value.kind == SchemaErrorKind.INVALID_TYPE
        assert exc.value.field == "year"

    def test_zero_mention_count_rejected(self):
        with pytest.raises(SchemaError) as exc:
            validate_records([_raw(mentionCount=0)])
        assert exc.value.field == "mentionCount"

    def test_missing_mention_count_stays_absent(self):
        assert validate_records([_raw()])[0].mention_count is None

    def test_sentiment_is_normalized(self):
        assert validate_records([_raw(sentiment="Positive")])[0].sentiment == Sentiment.POSITIVE
        assert validate_records([_raw(sentiment="MIXED")])[0].sentiment == Sentiment.MIXED

    def test_unknown_sentiment_is_dropped(self):
        assert validate_records([_raw(sentiment="ecstatic")])[0].sentiment is None

    def test_non_object_record_rejected(self):
        with pytest.raises(SchemaError) as exc:
            validate_records([_raw(), "Dune"])
        assert exc.value.index == 1

    def test_non_array_payload_rejected(self):
        with pytest.raises(SchemaError):
            validate_records({"title": "Dune"})

    def test_blank_director_becomes_absent(self):
        assert validate_records([_raw(director="  ")])[0].director is None


class TestParseExtractionPayload:
    """Decoding raw model output."""

    def test_code_fences_are_stripped(self):
        text = '```json\n[{"title": "Heat", "genres": ["Crime"], "language": "English", "country": "USA", "summary": "Cops and robbers."}]\n```'
        records = parse_extraction_payload(text)
        assert records[0].title == "Heat"

    def test_empty_response_means_no_movies(self):
        assert parse_extraction_payload("") == []

    def test_non_json_is_an_extraction_failure(self):
        with pytest.raises(ExtractionFailure):
            parse_extraction_payload("Sorry, I cannot help with that.")

    def test_schema_problems_surface_as_schema_error(self):
        with pytest.raises(SchemaError):
            parse_extraction_payload('[{"year": 2020}]')
