"""Validate the regulation and public holiday tables before deployment.

Usage:
    # Check the tables named in the settings (config/*.yaml by default)
    python scripts/check_tables.py

    # Check a candidate table for a new tax year
    python scripts/check_tables.py --regulations regulations_2026.yaml

    # Verbose logging
    python scripts/check_tables.py -v
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from config.settings import settings
from payroll_core.calculators.holidays import load_holiday_calendars
from payroll_core.calculators.regulations import RegulationConfigError, load_regulations
from payroll_core.validation import check_holidays, check_regulation

logger = logging.getLogger(__name__)


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Validate payroll regulation and holiday tables")
    parser.add_argument(
        "--regulations",
        default=settings.regulations_file,
        help="Regulation table, relative to config/ or absolute",
    )
    parser.add_argument(
        "--holidays",
        default=settings.holidays_file,
        help="Holiday table, relative to config/ or absolute",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose logging")
    return parser.parse_args()


def run(args: argparse.Namespace) -> int:
    try:
        regulations = load_regulations(args.regulations)
        calendars = load_holiday_calendars(args.holidays)
    except RegulationConfigError as e:
        logger.error("%s", e)
        return 1

    failures = 0
    for country, regulation in regulations.items():
        for problem in check_regulation(regulation):
            logger.error("%s: %s", country.value, problem)
            failures += 1

    for country, years in calendars.items():
        for year, holidays in sorted(years.items()):
            for problem in check_holidays(year, holidays):
                logger.error("%s %d: %s", country.value, year, problem)
                failures += 1
            logger.debug("%s %d: %d holidays", country.value, year, len(holidays))

    if failures:
        logger.error("%d problem(s) found", failures)
        return 1
    logger.info("All tables are consistent.")
    return 0


def main() -> None:
    args = parse_args()

    log_level = logging.DEBUG if args.verbose else getattr(logging, settings.log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )

    sys.exit(run(args))


if __name__ == "__main__":
    main()
