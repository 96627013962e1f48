#!/usr/bin/env python3
"""
Final verification of the local book API: Hardcover-only results, no fallbacks.

Checks, in order:
1. Search endpoint returns Hardcover results with proxied covers
2. Image proxy serves an image
3. Hardcover answers the same search directly
4. Bulk genre listing contains only Hardcover books

Usage:
    python run_verification.py [search term]
"""
import sys

from hardcover.config import Settings
from hardcover.logging_setup import configure_logging
from hardcover.verification import DEFAULT_SEARCH_TERM, VerificationHarness


def main(term: str = DEFAULT_SEARCH_TERM) -> int:
    settings = Settings()
    configure_logging(settings.log_level)

    VerificationHarness(settings).run(term)

    print("\n🎉 Final Verification Complete!")
    print("Check the results above to confirm all functionality is working.")
    # Failures are reported above, not through the exit status
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1] if len(sys.argv) > 1 else DEFAULT_SEARCH_TERM))
