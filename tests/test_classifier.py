"""Tests for hardcover.classifier: ordered keyword genre rules."""

from __future__ import annotations

import pytest

from hardcover.classifier import GENRE_RULES, build_haystack, classify, classify_list
from hardcover.models import Genre, ListRecord

from .conftest import make_list


class TestRules:
    def test_rules_are_an_ordered_list(self):
        assert isinstance(GENRE_RULES, list)
        assert [genre for _, genre in GENRE_RULES] == [
            Genre.ROMANTASY, Genre.FANTASY, Genre.SCIFI, Genre.COZY, Genre.ROMANCE,
        ]

    def test_haystack_combines_fields_lowercase(self):
        record = make_list("Dark FAE", slug="dark-fae", description="Court Intrigue")
        assert build_haystack(record) == "dark fae dark-fae court intrigue"


class TestClassify:
    def test_scenario_romantasy(self):
        record = ListRecord(id=1, name="Best Romantasy Books", slug="romantasy-2024", book_count=50)
        assert classify(record) is Genre.ROMANTASY

    def test_scenario_cozy_with_few_books(self):
        record = ListRecord(id=2, name="Cozy Mysteries", slug="cozy-reads", book_count=5)
        assert classify(record) is Genre.COZY

    def test_romantasy_beats_fantasy(self):
        record = make_list("Romantasy and Fantasy Favourites", slug="fantasy-romantasy")
        assert classify(record) is Genre.ROMANTASY

    @pytest.mark.parametrize("name", ["Fae Courts", "Fairy Tale Retellings"])
    def test_fae_and_fairy_are_romantasy(self, name):
        assert classify(make_list(name)) is Genre.ROMANTASY

    def test_fantasy(self):
        assert classify(make_list("Epic Fantasy Sagas")) is Genre.FANTASY

    def test_fantasy_with_sci_falls_through_to_scifi(self):
        record = make_list("Science Fiction and Fantasy", slug="sff")
        assert classify(record) is Genre.SCIFI

    def test_fantasy_with_sci_and_no_scifi_term_is_other(self):
        record = make_list("Fantasy for scientists", slug="list-1", book_count=30)
        assert classify(record) is Genre.OTHER

    @pytest.mark.parametrize("name", ["Sci-Fi Classics", "Hard Science Fiction", "Dystopian Futures"])
    def test_scifi(self, name):
        assert classify(make_list(name, slug="list")) is Genre.SCIFI

    def test_comfort_is_cozy(self):
        assert classify(make_list("Comfort Reads")) is Genre.COZY

    def test_romance(self):
        assert classify(make_list("Contemporary Romance")) is Genre.ROMANCE

    def test_description_is_searched(self):
        record = make_list("Staff Picks", slug="staff-picks", description="Our favourite dystopian novels")
        assert classify(record) is Genre.SCIFI

    def test_other_needs_more_than_ten_books(self):
        assert classify(make_list("Book Club", slug="club", book_count=11)) is Genre.OTHER

    def test_ten_books_without_match_is_excluded(self):
        assert classify(make_list("Book Club", slug="club", book_count=10)) is None

    def test_none_description_equals_empty(self):
        a = make_list("Summer Reads", slug="summer", description=None, book_count=12)
        b = make_list("Summer Reads", slug="summer", description="", book_count=12)
        assert classify(a) == classify(b)

    def test_classify_list_wraps_label(self):
        record = make_list("Cozy Fantasy", slug="cozy")
        classified = classify_list(record)
        assert classified.genre is Genre.FANTASY
        assert classified.record is record

    def test_classify_list_excluded(self):
        assert classify_list(make_list("Misc", slug="misc", book_count=3)) is None
