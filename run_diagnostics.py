#!/usr/bin/env python3
"""
Hardcover API diagnostics: runs probe queries to pinpoint upstream problems.
"""
import sys

from hardcover.config import Settings
from hardcover.diagnostics import run_diagnostics
from hardcover.errors import ConfigError
from hardcover.graphql_client import GraphQLClient
from hardcover.logging_setup import configure_logging


def main() -> int:
    settings = Settings()
    configure_logging(settings.log_level)

    try:
        settings.require_token()
    except ConfigError as e:
        print(f"❌ {e}")
        return 1

    print("🔍 Hardcover API Diagnostic")
    print("===========================\n")
    print(f"Token (first 10 chars): {settings.masked_token()}")
    print(f"Token length: {len(settings.hardcover_token)}")

    run_diagnostics(GraphQLClient.from_settings(settings))
    return 0


if __name__ == "__main__":
    sys.exit(main())
