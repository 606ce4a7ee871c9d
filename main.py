#!/usr/bin/env python3
"""
Olympic Stats - Command Line Entry Point

Loads the athletes CSV and prints a summary of headline statistics.

Usage:
    python main.py
    python main.py --data data/athletes.csv --log-level DEBUG
"""
import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent / 'src'))

from config.olympics_settings import OlympicsSettings
from logging_config import setup_logging, get_logger, log_exception
from olympics.data_loader import load_olympics_data
from olympics.olympics_exceptions import OlympicsException

logger = get_logger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Olympic athletes statistics")
    parser.add_argument(
        "--data",
        default=OlympicsSettings.DEFAULT_DATA_FILE,
        help=f"Athletes CSV file (default: {OlympicsSettings.DEFAULT_DATA_FILE})"
    )
    parser.add_argument(
        "--log-level",
        default=OlympicsSettings.LOG_LEVEL,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Console log level"
    )
    parser.add_argument(
        "--no-log-files",
        action="store_true",
        help=f"Only log to the console (skip {OlympicsSettings.LOG_DIR}/)"
    )
    return parser.parse_args(argv)


def main(argv=None) -> int:
    """Load the dataset and print the headline statistics."""
    args = parse_args(argv)
    setup_logging(
        level=args.log_level,
        log_dir=OlympicsSettings.LOG_DIR,
        enable_file=not args.no_log_files
    )

    try:
        dataset = load_olympics_data(args.data)
    except OlympicsException as e:
        log_exception(logger, e, context={"data": args.data})
        return 1

    api = dataset.build_stats_api()

    print("Countries with the most medalists:")
    for country, medalists in api.country_with_most_medalists().items():
        print(f"  {country}: {medalists}")

    print("Star athletes:")
    for athlete, medals in api.star_athletes().items():
        print(f"  {athlete}: {medals}")

    share = api.medalist_percentage()
    total = len(api.athletes)
    print(f"Medalists: {round(share * total)} of {total} athletes ({round(share * 100, 1)}%)")

    return 0


if __name__ == "__main__":
    sys.exit(main())
