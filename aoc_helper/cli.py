import argparse
import datetime
import logging
import sys
from importlib.metadata import version

from termcolor import colored

from .dates import FIRST_YEAR
from .dates import LAST_DAY
from .dates import most_recent_year
from .exceptions import AocHelperError
from .get import get_data
from .utils import AOC_TZ


def main():
    """Get your puzzle input data, caching it if necessary, and print it on stdout."""
    aoc_now = datetime.datetime.now(tz=AOC_TZ)
    days = range(1, LAST_DAY + 1)
    years = range(FIRST_YEAR, aoc_now.year + int(aoc_now.month == 12))
    v = version("advent-of-code-helper")
    parser = argparse.ArgumentParser(
        description=f"Advent of Code Helper v{v}",
        usage=f"aoc-helper [day 1-25] [year {FIRST_YEAR}-{years[-1]}]",
    )
    parser.add_argument(
        "day",
        nargs="?",
        type=int,
        default=min(aoc_now.day, LAST_DAY) if aoc_now.month == 12 else 1,
        help="1-25 (default: %(default)s)",
    )
    parser.add_argument(
        "year",
        nargs="?",
        type=int,
        default=most_recent_year(),
        help=f"{FIRST_YEAR}-{years[-1]} (default: %(default)s)",
    )
    parser.add_argument(
        "-i",
        "--input",
        metavar="PATH",
        help="cache file for the input (default: inputs/<year>/day<day>.txt)",
    )
    parser.add_argument(
        "-s",
        "--session",
        metavar="TOKEN",
        help="session id, overrides the environment and config file",
    )
    parser.add_argument(
        "-v",
        "--version",
        action="version",
        version=f"%(prog)s v{v}",
    )
    parser.add_argument(
        "-d",
        "--debug",
        action="store_true",
        help="enable debug logging",
    )
    args = parser.parse_args()
    if args.debug:
        logging.basicConfig(level=logging.DEBUG)
    if args.day in years and args.year in days:
        # be forgiving
        args.day, args.year = args.year, args.day
    if args.day not in days or args.year not in years:
        parser.print_usage()
        parser.exit(1)
    try:
        data = get_data(
            session_id=args.session,
            day=args.day,
            year=args.year,
            input_path=args.input,
        )
    except AocHelperError as err:
        print(colored(f"ERROR: {err}", "red"), file=sys.stderr)
        sys.exit(1)
    print(data)
