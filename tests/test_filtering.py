"""Tests for movie filtering."""

from cinechat.core.filtering import filter_records, distinct_genres
from cinechat.core.models import MovieRecord


def movie(title, genres, director=None):
    return MovieRecord(title=title, genres=genres, language="English", country="USA",
                       summary="...", director=director)


class TestFilterRecords:
    """Search term and genre selector."""

    def setup_method(self):
        self.movies = [
            movie("The Batman", ["Action", "Crime"], "Matt Reeves"),
            movie("Superbad", ["Comedy"], "Greg Mottola"),
            movie("Batman Begins", ["Action"], "Christopher Nolan"),
            movie("In Bruges", ["Dark Comedy", "Crime"]),
            movie("Memento", ["Thriller"], "Christopher Nolan"),
        ]

    def test_no_op_filters_are_identity(self):
        assert filter_records(self.movies, "", "All") == self.movies

    def test_search_matches_title_case_insensitively(self):
        titles = [m.title for m in filter_records(self.movies, "batman", "All")]
        assert titles == ["The Batman", "Batman Begins"]

    def test_search_matches_director(self):
        titles = [m.title for m in filter_records(self.movies, "NOLAN", "All")]
        assert titles == ["Batman Begins", "Memento"]

    def test_missing_director_never_matches(self):
        assert filter_records(self.movies, "bruges director", "All") == []

    def test_genre_filter_is_substring(self):
        titles = [m.title for m in filter_records(self.movies, "", "Com")]
        assert titles == ["Superbad", "In Bruges"]

    def test_genre_filter_is_case_sensitive(self):
        assert filter_records(self.movies, "", "comedy") == []

    def test_both_filters_must_hold(self):
        titles = [m.title for m in filter_records(self.movies, "nolan", "Action")]
        assert titles == ["Batman Begins"]


class TestDistinctGenres:
    """Genre selector options."""

    def test_sorted_with_all_first(self):
        movies = [movie("A", ["Drama", "Action"]), movie("B", ["Action", "Comedy"])]
        assert distinct_genres(movies) == ["All", "Action", "Comedy", "Drama"]

    def test_no_movies(self):
        assert distinct_genres([]) == ["All"]
