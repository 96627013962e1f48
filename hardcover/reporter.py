# hardcover/reporter.py
"""
Aggregation of classified lists and rendering of genre reports.

Aggregation is pure and sink-agnostic; the render/export helpers below are
interchangeable consumers of the resulting GenreReport.
"""

import json
import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Sequence

import pandas as pd

from .classifier import classify_list
from .models import ClassifiedList, Genre, GenreReport, ListRecord

logger = logging.getLogger(__name__)

GENRE_KEYWORDS = [
    "fantasy", "romance", "sci", "science", "cozy", "dystopia",
    "romantasy", "fae", "comfort", "space", "cyber",
]

REPORT_COLUMNS = ["genre", "slug", "name", "book_count", "description"]


def aggregate(lists: Sequence[ListRecord]) -> GenreReport:
    """
    Classify lists and group them by genre.

    Lists with no books are dropped before classification. Buckets keep the
    input order and empty buckets are left out.
    """
    grouped: Dict[Genre, List[ClassifiedList]] = {genre: [] for genre in Genre}
    empty_dropped = 0
    unclassified = 0

    for record in lists:
        if record.book_count == 0:
            empty_dropped += 1
            continue

        classified = classify_list(record)
        if classified is None:
            unclassified += 1
            continue

        grouped[classified.genre].append(classified)

    return GenreReport(
        buckets={genre: items for genre, items in grouped.items() if items},
        total_input=len(lists),
        empty_dropped=empty_dropped,
        unclassified=unclassified,
    )


def render_text(report: GenreReport) -> str:
    """Human-readable report grouped by genre"""
    lines = []

    for genre, lists in report:
        lines.append("")
        lines.append(f"📚 {genre.value.upper()} ({len(lists)} lists found):")
        lines.append("─" * 80)

        for item in lists:
            lines.append(f'  ✅ "{item.slug}"')
            lines.append(f"     Name: {item.name}")
            lines.append(f"     Books: {item.book_count}")
            if item.record.short_description:
                lines.append(f"     Desc: {item.record.short_description}...")
            lines.append("")

    if not report.buckets:
        lines.append("⚠️  No lists matched any genre")

    return "\n".join(lines)


def report_to_dataframe(report: GenreReport) -> pd.DataFrame:
    """Flatten a report into one row per classified list"""
    rows = [
        {
            "genre": genre.value,
            "slug": item.slug,
            "name": item.name,
            "book_count": item.book_count,
            "description": item.record.description or "",
        }
        for genre, lists in report
        for item in lists
    ]
    return pd.DataFrame(rows, columns=REPORT_COLUMNS)


def save_report_csv(report: GenreReport, csv_file: str) -> pd.DataFrame:
    path = Path(csv_file)
    path.parent.mkdir(parents=True, exist_ok=True)

    df = report_to_dataframe(report)
    df.to_csv(path, index=False)
    logger.info(f"Saved {len(df)} classified lists to {path}")
    return df


def export_report_json(report: GenreReport, output_path: Optional[str] = None) -> Dict[str, Any]:
    """
    Export a report to JSON.

    Args:
        report: Aggregated genre report
        output_path: Where to write the file; if None nothing is written

    Returns:
        The exported data structure
    """
    export_data = {
        "generated_at": datetime.now().isoformat(),
        "summary": report.get_summary(),
        "genres": {
            genre.value: [
                {
                    "id": item.record.id,
                    "slug": item.slug,
                    "name": item.name,
                    "book_count": item.book_count,
                    "description": item.record.description,
                }
                for item in lists
            ]
            for genre, lists in report
        },
    }

    if output_path is not None:
        path = Path(output_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(export_data, f, indent=2, ensure_ascii=False)
        logger.info(f"Exported genre report to {path}")

    return export_data


def nonempty_by_count(records: Iterable[ListRecord]) -> List[ListRecord]:
    """Lists with at least one book, largest first"""
    return sorted(
        (r for r in records if r.book_count > 0),
        key=lambda r: r.book_count,
        reverse=True,
    )


def render_list_counts(records: Iterable[ListRecord]) -> str:
    ranked = nonempty_by_count(records)
    lines = [f"📚 Found {len(ranked)} lists with books", "=" * 80]
    for r in ranked:
        lines.append(f'{str(r.book_count).rjust(5)} books | "{r.slug}" - {r.name}')
    return "\n".join(lines)


def filter_by_keywords(
    records: Iterable[ListRecord], keywords: Sequence[str] = GENRE_KEYWORDS
) -> List[ListRecord]:
    """Lists whose name or slug mentions any of the keywords"""
    lowered = [k.lower() for k in keywords]
    matches = []
    for r in records:
        combined = f"{r.name} {r.slug}".lower()
        if any(k in combined for k in lowered):
            matches.append(r)
    return matches
