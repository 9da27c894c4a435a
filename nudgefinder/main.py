"""Command line entry point for nudgefinder."""

import argparse
import logging
import sys

from dateutil.parser import isoparse

from nudgefinder.config import Config, ExtractionConfig
from nudgefinder.formatters import format_reminder_list, format_reminders_json
from nudgefinder.parser.nlp import ReminderExtractor
from nudgefinder.utils.time_utils import Clock, FixedClock

logger = logging.getLogger(__name__)


def build_arg_parser() -> argparse.ArgumentParser:
    """Build the command line parser."""
    parser = argparse.ArgumentParser(
        prog="nudgefinder",
        description="Extract reminders from a transcript.",
    )
    parser.add_argument(
        "file",
        nargs="?",
        type=argparse.FileType("r", encoding="utf-8"),
        default=sys.stdin,
        help="Transcript file (default: stdin)",
    )
    parser.add_argument("--max", type=int, dest="max_reminders", help="Maximum reminders to return")
    parser.add_argument("--min-confidence", type=float, help="Confidence threshold (0-1)")
    parser.add_argument("--timezone", help="Local timezone, e.g. America/Toronto")
    parser.add_argument("--now", help="Resolve times against this ISO instant instead of the clock")
    parser.add_argument("--chunk-size", type=int, help="Process long transcripts in chunks of N characters")
    parser.add_argument("--json", action="store_true", help="Print JSON instead of text")
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the extractor over a transcript and print the reminders."""
    args = build_arg_parser().parse_args(argv)

    # Configure logging
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO),
        stream=sys.stderr,
    )

    # Validate configuration
    try:
        Config.validate()
        config = ExtractionConfig(
            max_reminders=args.max_reminders if args.max_reminders is not None else Config.MAX_REMINDERS,
            min_confidence_threshold=(
                args.min_confidence if args.min_confidence is not None else Config.MIN_CONFIDENCE
            ),
        )
        config.validate()

        timezone = args.timezone or Config.TIMEZONE
        clock = FixedClock(isoparse(args.now), timezone) if args.now else Clock(timezone)
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return 1

    with args.file as handle:
        text = handle.read()

    extractor = ReminderExtractor(config, clock)
    if args.chunk_size:
        reminders = extractor.extract_reminders_chunked(text, args.chunk_size)
    else:
        reminders = extractor.extract_reminders(text)

    if args.json:
        print(format_reminders_json(reminders))
    else:
        print(format_reminder_list(reminders, clock.now()))

    return 0


if __name__ == "__main__":
    sys.exit(main())
