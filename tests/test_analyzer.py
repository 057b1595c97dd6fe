"""Tests for the analysis session."""

import pytest
from unittest.mock import Mock

from cinechat.core.errors import AnalysisInProgress, ExtractionFailure, SchemaError, SchemaErrorKind
from cinechat.services.analyzer import AnalysisSession, AnalysisStatus, ERROR_MESSAGE, read_chat_log
from cinechat.services.llm import StaticExtractionService

PAYLOAD = [
    {"title": "Heat", "year": 1995, "genres": ["Crime"], "language": "English",
     "country": "USA", "summary": "Cops and robbers.", "recommender": "Sam"},
]


class TestAnalysisSession:
    """Run lifecycle."""

    def setup_method(self):
        self.session = AnalysisSession(StaticExtractionService(PAYLOAD))

    def test_starts_idle_and_empty(self):
        assert self.session.status == AnalysisStatus.IDLE
        assert self.session.movies == []

    def test_successful_run(self):
        result = self.session.analyze("Sam: watch Heat", source_name="club.txt")
        assert self.session.status == AnalysisStatus.COMPLETE
        assert [m.title for m in result.movies] == ["Heat"]
        assert result.source_name == "club.txt"
        assert result.characters_analyzed == len("Sam: watch Heat")
        assert not result.truncated

    def test_new_run_replaces_previous_result(self):
        self.session.analyze("first")
        self.session.service = StaticExtractionService([])
        self.session.analyze("second")
        assert self.session.movies == []

    def test_failed_run_leaves_no_movies(self):
        self.session.analyze("first")
        self.session.service = Mock()
        self.session.service.extract.side_effect = ExtractionFailure("quota exceeded")
        with pytest.raises(ExtractionFailure):
            self.session.analyze("second")
        assert self.session.status == AnalysisStatus.ERROR
        assert self.session.error == ERROR_MESSAGE
        assert self.session.movies == []

    def test_schema_error_fails_run(self):
        session = AnalysisSession(StaticExtractionService([{"year": 2020}]))
        with pytest.raises(SchemaError) as exc:
            session.analyze("chat")
        assert exc.value.kind == SchemaErrorKind.MISSING_FIELD
        assert session.status == AnalysisStatus.ERROR

    def test_overlapping_runs_are_refused(self):
        self.session.status = AnalysisStatus.ANALYZING
        with pytest.raises(AnalysisInProgress):
            self.session.analyze("again")

    def test_reset(self):
        self.session.analyze("chat")
        self.session.reset()
        assert self.session.status == AnalysisStatus.IDLE
        assert self.session.result is None
        assert self.session.error is None


class TestChatFiles:
    """Reading chat exports."""

    def test_reads_txt(self, tmp_path):
        path = tmp_path / "chat.txt"
        path.write_text("Ana: Dune was great", encoding="utf-8")
        session = AnalysisSession(StaticExtractionService([]))
        assert session.load_file(path) == "Ana: Dune was great"
        assert session.status == AnalysisStatus.IDLE

    def test_rejects_other_formats(self, tmp_path):
        path = tmp_path / "chat.pdf"
        path.write_bytes(b"%PDF")
        with pytest.raises(ValueError):
            read_chat_log(path)

    def test_missing_file_sets_error(self, tmp_path):
        session = AnalysisSession(StaticExtractionService([]))
        with pytest.raises(OSError):
            session.load_file(tmp_path / "nope.txt")
        assert session.status == AnalysisStatus.ERROR
