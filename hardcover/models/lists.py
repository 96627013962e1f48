# hardcover/models/lists.py
"""
Data models for Hardcover lists and their genre classification.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterator, List, Optional, Tuple


class Genre(str, Enum):
    """Genre buckets; declaration order is report order"""
    ROMANTASY = "romantasy"
    FANTASY = "fantasy"
    SCIFI = "scifi"
    COZY = "cozy"
    ROMANCE = "romance"
    OTHER = "other"


@dataclass(frozen=True)
class ListRecord:
    """Snapshot of one upstream list at fetch time"""
    id: Optional[int]
    name: str
    slug: str
    description: Optional[str] = None
    book_count: int = 0

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "ListRecord":
        """Build a record from a raw ``lists`` entry of the GraphQL payload"""
        aggregate = (raw.get("list_books_aggregate") or {}).get("aggregate") or {}
        count = aggregate.get("count") or 0
        return cls(
            id=raw.get("id"),
            name=raw.get("name") or "",
            slug=raw.get("slug") or "",
            description=raw.get("description"),
            book_count=max(int(count), 0),
        )

    @property
    def short_description(self) -> str:
        return (self.description or "")[:60]


@dataclass(frozen=True)
class ClassifiedList:
    """A list record with exactly one genre label"""
    record: ListRecord
    genre: Genre

    @property
    def slug(self) -> str:
        return self.record.slug

    @property
    def name(self) -> str:
        return self.record.name

    @property
    def book_count(self) -> int:
        return self.record.book_count


@dataclass
class GenreReport:
    """
    Classified lists grouped by genre.

    Buckets keep upstream order and only non-empty buckets are present.
    """
    buckets: Dict[Genre, List[ClassifiedList]] = field(default_factory=dict)
    total_input: int = 0
    empty_dropped: int = 0
    unclassified: int = 0

    def __iter__(self) -> Iterator[Tuple[Genre, List[ClassifiedList]]]:
        return iter(self.buckets.items())

    def __getitem__(self, genre: Genre) -> List[ClassifiedList]:
        return self.buckets[genre]

    def __contains__(self, genre: object) -> bool:
        return genre in self.buckets

    def __len__(self) -> int:
        return len(self.buckets)

    @property
    def genres(self) -> List[Genre]:
        return list(self.buckets)

    @property
    def classified_count(self) -> int:
        return sum(len(lists) for lists in self.buckets.values())

    def genre_of(self, slug: str) -> Optional[Genre]:
        """Return the bucket a slug landed in, or None if it was excluded"""
        for genre, lists in self.buckets.items():
            if any(item.slug == slug for item in lists):
                return genre
        return None

    def get_summary(self) -> Dict[str, Any]:
        """Get a summary dict for reporting"""
        return {
            "total_lists": self.total_input,
            "empty_dropped": self.empty_dropped,
            "unclassified": self.unclassified,
            "classified": self.classified_count,
            "per_genre": {genre.value: len(lists) for genre, lists in self.buckets.items()},
        }
