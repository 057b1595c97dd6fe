"""Search and genre filtering for the movie table."""

from typing import Iterable, List

from .constants import DashboardConstants
from .models import MovieRecord


def _matches_search(record: MovieRecord, term: str) -> bool:
    term = term.lower()
    if term in record.title.lower():
        return True
    return record.director is not None and term in record.director.lower()


def _matches_genre(record: MovieRecord, genre_filter: str) -> bool:
    if genre_filter == DashboardConstants.ALL_GENRES:
        return True
    # substring on purpose: "Com" selects both "Comedy" and "Dark Comedy"
    return any(genre_filter in g for g in record.genres)


def filter_records(
    records: Iterable[MovieRecord],
    search_term: str = "",
    genre_filter: str = DashboardConstants.ALL_GENRES,
) -> List[MovieRecord]:
    """Movies matching both the search term and the genre selector, in order."""
    search_term = search_term or ""
    genre_filter = genre_filter or DashboardConstants.ALL_GENRES
    return [
        r for r in records
        if _matches_search(r, search_term) and _matches_genre(r, genre_filter)
    ]


def distinct_genres(records: Iterable[MovieRecord]) -> List[str]:
    """Genre selector options: "All" followed by every genre, sorted."""
    genres = set()
    for record in records:
        genres.update(record.genres)
    return [DashboardConstants.ALL_GENRES] + sorted(genres)
