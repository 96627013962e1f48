#!/usr/bin/env python3
"""
Discovers public Hardcover lists and groups them by genre.

Usage:
    python run_discovery.py [output.json | output.csv]
"""
import sys
import logging

from hardcover.config import Settings
from hardcover.discovery import discover
from hardcover.errors import FetchError
from hardcover.graphql_client import GraphQLClient
from hardcover.logging_setup import configure_logging
from hardcover.reporter import export_report_json, render_text, save_report_csv

logger = logging.getLogger("run_discovery")


def main(output_path=None) -> int:
    settings = Settings()
    configure_logging(settings.log_level)
    client = GraphQLClient.from_settings(settings)

    try:
        report = discover(client)
    except FetchError as e:
        # No partial report: classification needs the complete list
        logger.error(f"Discovery failed: {e}")
        return 0

    summary = report.get_summary()
    print(f"\n🎉 Found {summary['total_lists']} lists on Hardcover!\n")
    print("=" * 80)
    print(render_text(report))
    print("\n" + "=" * 80)
    print("💡 TIP: Use these slugs in your GENRE_CONFIG")
    print("=" * 80 + "\n")

    if output_path:
        if output_path.lower().endswith(".csv"):
            save_report_csv(report, output_path)
        else:
            export_report_json(report, output_path)
        print(f"📄 Report saved to {output_path}")

    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else None))
