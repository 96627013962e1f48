# hardcover/models/__init__.py
"""
Data models for Hardcover list discovery and API verification.
"""

from .lists import Genre, ListRecord, ClassifiedList, GenreReport
from .verification import SearchResult, VerificationOutcome, VerificationSummary

__all__ = [
    "Genre",
    "ListRecord",
    "ClassifiedList",
    "GenreReport",
    "SearchResult",
    "VerificationOutcome",
    "VerificationSummary"
]
