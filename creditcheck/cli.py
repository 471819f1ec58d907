"""
Command-Line Interface for the credit checker.

Evaluates one saved selection against the catalog and the graduation
requirements, and prints the result.

    python -m creditcheck --records my_courses.json --track B

EXIT CODES:
-----------
0: the student can graduate
1: the student cannot graduate yet
2: an input file is missing or invalid
"""

import argparse
import logging
import sys

from .checker import CreditChecker
from .config import DEFAULT_CATALOG_PATH, DEFAULT_RECORDS_PATH, DEFAULT_REQUIREMENTS_PATH
from .errors import DataValidationError
from .models import LanguageTrack

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="creditcheck",
        description="Check course records against graduation credit requirements.",
    )
    parser.add_argument("--catalog", default=str(DEFAULT_CATALOG_PATH),
                        help="Path to the course catalog JSON")
    parser.add_argument("--requirements", default=str(DEFAULT_REQUIREMENTS_PATH),
                        help="Path to the graduation requirements JSON")
    parser.add_argument("--records", default=str(DEFAULT_RECORDS_PATH),
                        help="Path to the student's saved course records JSON")
    parser.add_argument("--track", choices=[t.value for t in LanguageTrack], default="A",
                        help="Language track: A for native Japanese speakers, B otherwise")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log loading and skipped records")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    checker = CreditChecker(args.catalog, args.requirements)
    try:
        result = checker.run(args.records, LanguageTrack(args.track))
    except (FileNotFoundError, DataValidationError) as exc:
        logger.error("%s", exc)
        return 2

    return 0 if result["summary"].can_graduate else 1


if __name__ == "__main__":
    sys.exit(main())
