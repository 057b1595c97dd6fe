"""Aggregation of extracted movies into dashboard statistics.

Genres are counted per occurrence (a movie with three genres feeds three
buckets, repeats included). Every other dimension is counted per movie.
"""

import logging
import re
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping

from .constants import DashboardConstants
from .models import MovieRecord, Sentiment, DerivedStat, DashboardStats

logger = logging.getLogger(__name__)

_DECADE_RE = re.compile(r"-?\d+")


def count_by_genre(records: Iterable[MovieRecord]) -> Dict[str, int]:
    """Count every trimmed genre label, including repeats within a movie."""
    counts = defaultdict(int)
    for record in records:
        for genre in record.genres:
            counts[genre.strip()] += 1
    return dict(counts)


def count_by_country(records: Iterable[MovieRecord]) -> Dict[str, int]:
    counts = defaultdict(int)
    for record in records:
        counts[record.country.strip()] += 1
    return dict(counts)


def count_by_language(records: Iterable[MovieRecord]) -> Dict[str, int]:
    counts = defaultdict(int)
    for record in records:
        counts[record.language.strip()] += 1
    return dict(counts)


def has_recommender(record: MovieRecord) -> bool:
    """True when the movie is credited to someone."""
    return bool(record.recommender) and record.recommender not in DashboardConstants.RECOMMENDER_SENTINELS


def count_by_recommender(records: Iterable[MovieRecord]) -> Dict[str, int]:
    """Count movies per recommender, skipping unattributed ones."""
    counts = defaultdict(int)
    for record in records:
        if has_recommender(record):
            counts[record.recommender] += 1
    return dict(counts)


def decade_label(year: int) -> str:
    return f"{(year // 10) * 10}s"


def count_by_decade(records: Iterable[MovieRecord]) -> Dict[str, int]:
    counts = defaultdict(int)
    for record in records:
        if record.year is not None:
            counts[decade_label(record.year)] += 1
    return dict(counts)


def count_by_sentiment(records: Iterable[MovieRecord]) -> Dict[str, int]:
    """Count movies per sentiment label; movies without one are left out."""
    counts = {s.value: 0 for s in Sentiment}
    for record in records:
        if record.sentiment is not None:
            counts[Sentiment(record.sentiment).value] += 1
    return counts


def top_n(mapping: Mapping[str, int], n: int) -> List[DerivedStat]:
    """Rank labels by count, keeping first-seen order on ties."""
    # sorted() is stable, so equal counts stay in insertion order
    ranked = sorted(mapping.items(), key=lambda item: -item[1])
    return [DerivedStat(label, count) for label, count in ranked[:max(0, n)]]


def _decade_value(label: str) -> int:
    match = _DECADE_RE.search(label)
    return int(match.group(0)) if match else 0


def ordered_decades(mapping: Mapping[str, int]) -> List[DerivedStat]:
    """Order decade buckets chronologically ("1990s" before "2000s")."""
    ranked = sorted(mapping.items(), key=lambda item: _decade_value(item[0]))
    return [DerivedStat(label, count) for label, count in ranked]


def mention_count(record: MovieRecord) -> int:
    return record.mention_count if record.mention_count is not None else DashboardConstants.DEFAULT_MENTION_COUNT


def most_discussed(records: Iterable[MovieRecord], n: int = DashboardConstants.MOST_DISCUSSED) -> List[MovieRecord]:
    """Movies mentioned more than once, most mentioned first.

    An empty list means nothing stood out.
    """
    ranked = sorted(records, key=lambda r: -mention_count(r))
    return [r for r in ranked if mention_count(r) > 1][:max(0, n)]


def positive_ratio(records: List[MovieRecord]) -> float:
    """Share of movies with positive sentiment, 0.0 for no movies."""
    if not records:
        return 0.0
    positives = sum(1 for r in records if r.sentiment == Sentiment.POSITIVE)
    return positives / len(records)


def build_dashboard(records: List[MovieRecord]) -> DashboardStats:
    """Compute every dashboard statistic for a record set."""
    records = list(records)
    genre_counts = count_by_genre(records)
    top_genres = top_n(genre_counts, DashboardConstants.TOP_GENRES)
    top_countries = top_n(count_by_country(records), DashboardConstants.TOP_COUNTRIES)

    stats = DashboardStats(
        total_movies=len(records),
        top_genres=top_genres,
        top_countries=top_countries,
        top_languages=top_n(count_by_language(records), DashboardConstants.TOP_COUNTRIES),
        top_recommenders=top_n(count_by_recommender(records), DashboardConstants.TOP_RECOMMENDERS),
        decades=ordered_decades(count_by_decade(records)),
        sentiment=count_by_sentiment(records),
        most_discussed=most_discussed(records),
        positive_ratio=positive_ratio(records),
        top_genre=top_genres[0].label if top_genres else None,
        top_country=top_countries[0].label if top_countries else None,
        genre_counts=genre_counts,
    )
    logger.debug(f"Built dashboard for {stats.total_movies} movies")
    return stats


__all__ = [
    "count_by_genre",
    "count_by_country",
    "count_by_language",
    "count_by_recommender",
    "count_by_decade",
    "count_by_sentiment",
    "top_n",
    "ordered_decades",
    "most_discussed",
    "positive_ratio",
    "build_dashboard",
    "has_recommender",
    "decade_label",
    "mention_count",
]
