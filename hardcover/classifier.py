# hardcover/classifier.py
"""
Keyword-based genre classification for Hardcover lists.
"""

from typing import Callable, List, Optional, Tuple

from .models import ClassifiedList, Genre, ListRecord

OTHER_MIN_BOOKS = 10

Predicate = Callable[[str], bool]


def _any_of(*terms: str) -> Predicate:
    return lambda haystack: any(term in haystack for term in terms)


def _with_but_not(term: str, excluded: str) -> Predicate:
    return lambda haystack: term in haystack and excluded not in haystack


# Evaluated top to bottom, first match wins. "romantasy" must stay ahead of
# "fantasy" so romantasy lists never land in the plain fantasy bucket.
GENRE_RULES: List[Tuple[Predicate, Genre]] = [
    (_any_of("romantasy", "fae", "fairy"), Genre.ROMANTASY),
    (_with_but_not("fantasy", "sci"), Genre.FANTASY),
    (_any_of("sci-fi", "science fiction", "dystopian"), Genre.SCIFI),
    (_any_of("cozy", "comfort"), Genre.COZY),
    (_with_but_not("romance", "fantasy"), Genre.ROMANCE),
]


def build_haystack(record: ListRecord) -> str:
    """Lowercased name, slug and description joined into one string"""
    return f"{record.name} {record.slug} {record.description or ''}".lower()


def classify(record: ListRecord) -> Optional[Genre]:
    """
    Map a list to a genre bucket.

    Returns:
        The first matching genre, Genre.OTHER for unmatched lists with more
        than 10 books, or None when the list should be left out of the report.
    """
    haystack = build_haystack(record)

    for predicate, genre in GENRE_RULES:
        if predicate(haystack):
            return genre

    if record.book_count > OTHER_MIN_BOOKS:
        return Genre.OTHER

    return None


def classify_list(record: ListRecord) -> Optional[ClassifiedList]:
    genre = classify(record)
    if genre is None:
        return None
    return ClassifiedList(record=record, genre=genre)
