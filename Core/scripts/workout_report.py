# workout_report.py
"""
Print the muscle usage report for a workout.

Usage:
    python workout_report.py                          # demo pull day
    python workout_report.py tbar pull_up cable_row
    python workout_report.py squat --catalog exercises.json
"""
import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from pydantic import ValidationError

from config import get_settings
from errors import CoachError
from muscle_map import DEMO_WORKOUT, default_catalog, load_catalog
from muscle_load import report_for_workout


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Muscle usage report for a workout")
    parser.add_argument("exercises", nargs="*", help="Exercise names, in workout order")
    parser.add_argument("--catalog", help="Path to a JSON exercise catalog")
    parser.add_argument("--ranking", action="store_true", help="Also print remaining capacity per muscle")
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Error: invalid settings\n{e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if settings.DEBUG else settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    workout = args.exercises or DEMO_WORKOUT
    catalog_path = args.catalog or settings.CATALOG_PATH

    try:
        catalog = load_catalog(catalog_path) if catalog_path else default_catalog()
        report = report_for_workout(workout, catalog)
    except CoachError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(report.text, end="")

    if args.ranking:
        print()
        for usage in report.ranking:
            bar = "█" * max(int(usage.capacity / 5), 0)
            print(f"  {usage.muscle:15} {bar} {usage.capacity:g}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
