"""Data models for CineChat."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, List, Dict, Any, NamedTuple


class Sentiment(str, Enum):
    """General vibe of a movie recommendation."""
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"
    MIXED = "mixed"


@dataclass
class MovieRecord:
    """One distinct movie extracted from a chat log."""
    title: str
    genres: List[str]
    language: str
    country: str
    summary: str
    year: Optional[int] = None
    director: Optional[str] = None
    recommender: Optional[str] = None
    sentiment: Optional[Sentiment] = None
    mention_count: Optional[int] = None  # absent means mentioned once

    def to_dict(self) -> Dict[str, Any]:
        """Serialize using the extraction payload field names."""
        data = {
            "title": self.title,
            "year": self.year,
            "director": self.director,
            "genres": list(self.genres),
            "language": self.language,
            "country": self.country,
            "summary": self.summary,
            "recommender": self.recommender,
            "sentiment": self.sentiment.value if self.sentiment else None,
            "mentionCount": self.mention_count,
        }
        return {k: v for k, v in data.items() if v is not None}


class DerivedStat(NamedTuple):
    """A (label, count) pair produced by aggregation."""
    label: str
    count: int


@dataclass
class AnalysisResult:
    """Movies produced by a single extraction run."""
    movies: List[MovieRecord]
    source_name: Optional[str] = None
    characters_analyzed: int = 0
    truncated: bool = False


@dataclass
class DashboardStats:
    """Every statistic the dashboard displays for one record set."""
    total_movies: int
    top_genres: List[DerivedStat]
    top_countries: List[DerivedStat]
    top_languages: List[DerivedStat]
    top_recommenders: List[DerivedStat]
    decades: List[DerivedStat]
    sentiment: Dict[str, int]
    most_discussed: List[MovieRecord]
    positive_ratio: float
    top_genre: Optional[str] = None
    top_country: Optional[str] = None
    genre_counts: Dict[str, int] = field(default_factory=dict)
