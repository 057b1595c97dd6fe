"""Analysis session: one chat log in, one set of movies out."""

import logging
from enum import Enum
from pathlib import Path
from typing import List, Optional

from ..core.config import settings
from ..core.constants import FileConstants
from ..core.errors import AnalysisInProgress
from ..core.models import AnalysisResult, MovieRecord

logger = logging.getLogger(__name__)

ERROR_MESSAGE = "Failed to analyze the chat log. Ensure your API key is valid and the file contains text."


class AnalysisStatus(Enum):
    IDLE = "IDLE"
    READING_FILE = "READING_FILE"
    ANALYZING = "ANALYZING"
    COMPLETE = "COMPLETE"
    ERROR = "ERROR"


def read_chat_log(path) -> str:
    """Read a plain-text chat export."""
    path = Path(path)
    if path.suffix.lower() not in FileConstants.CHAT_LOG_SUFFIXES:
        raise ValueError(f"Please upload a .txt file (got {path.name})")
    return path.read_text(encoding=FileConstants.CHAT_LOG_ENCODING)


class AnalysisSession:
    """Holds the state of the current analysis run.

    Each run replaces the previous result wholesale; a failed run leaves no
    movies behind.
    """

    def __init__(self, service):
        self.service = service
        self.status = AnalysisStatus.IDLE
        self.result: Optional[AnalysisResult] = None
        self.error: Optional[str] = None

    @property
    def movies(self) -> List[MovieRecord]:
        return self.result.movies if self.result else []

    @property
    def busy(self) -> bool:
        return self.status in (AnalysisStatus.READING_FILE, AnalysisStatus.ANALYZING)

    def _guard(self):
        if self.busy:
            raise AnalysisInProgress(f"An analysis is already running ({self.status.value})")

    def load_file(self, path) -> str:
        """Read a chat log from disk in preparation for a run."""
        self._guard()
        self.status = AnalysisStatus.READING_FILE
        try:
            text = read_chat_log(path)
        except (OSError, ValueError, UnicodeDecodeError) as e:
            self.status = AnalysisStatus.ERROR
            self.error = str(e)
            raise
        self.status = AnalysisStatus.IDLE
        return text

    def analyze(self, chat_text: str, source_name: Optional[str] = None) -> AnalysisResult:
        """Run the extraction service over a chat log."""
        self._guard()
        self.status = AnalysisStatus.ANALYZING
        self.error = None
        self.result = None

        truncated = len(chat_text) > settings.max_chat_chars
        if truncated:
            logger.warning(f"Chat log has {len(chat_text)} characters, only the first {settings.max_chat_chars} are analyzed")

        try:
            movies = self.service.extract(chat_text)
        except Exception as e:
            logger.error(f"Analysis failed: {e}")
            self.status = AnalysisStatus.ERROR
            self.error = ERROR_MESSAGE
            raise

        self.result = AnalysisResult(
            movies=movies,
            source_name=source_name,
            characters_analyzed=min(len(chat_text), settings.max_chat_chars),
            truncated=truncated,
        )
        self.status = AnalysisStatus.COMPLETE
        logger.info(f"Analysis complete: {len(movies)} movies found")
        return self.result

    def reset(self):
        """Discard the current result and return to idle."""
        self.status = AnalysisStatus.IDLE
        self.result = None
        self.error = None
