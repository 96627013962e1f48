# hardcover/models/verification.py
"""
Data models for the verification harness and upstream diagnostics.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional


@dataclass(frozen=True)
class SearchResult:
    """One entry of the local search API response"""
    title: str
    author: str
    source: Optional[str] = None
    cover: Optional[str] = None

    @classmethod
    def from_api(cls, raw: Dict[str, Any]) -> "SearchResult":
        return cls(
            title=str(raw.get("title", "")),
            author=str(raw.get("author", "")),
            source=raw.get("source"),
            cover=raw.get("cover") or None,
        )


@dataclass
class VerificationOutcome:
    """Result of a single check"""
    check_name: str
    passed: bool
    detail: str = ""
    skipped: bool = False

    @property
    def status(self) -> str:
        if self.skipped:
            return "SKIPPED"
        return "PASSED" if self.passed else "FAILED"


@dataclass
class VerificationSummary:
    """Ordered outcomes of a harness or diagnostics run"""
    outcomes: List[VerificationOutcome] = field(default_factory=list)

    def add(self, outcome: VerificationOutcome) -> None:
        self.outcomes.append(outcome)

    @property
    def passed(self) -> int:
        return sum(1 for o in self.outcomes if o.passed and not o.skipped)

    @property
    def failed(self) -> int:
        return sum(1 for o in self.outcomes if not o.passed and not o.skipped)

    @property
    def skipped(self) -> int:
        return sum(1 for o in self.outcomes if o.skipped)

    @property
    def all_passed(self) -> bool:
        return self.failed == 0

    def outcome(self, check_name: str) -> Optional[VerificationOutcome]:
        for o in self.outcomes:
            if o.check_name == check_name:
                return o
        return None
