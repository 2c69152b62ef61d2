"""Command-line parser: reads announcement text and prints the events as JSON."""

import argparse
import json
import logging
import sys

from eventmail.parsing import segment

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Parse pasted event announcements into JSON")
    parser.add_argument(
        "file",
        nargs="?",
        default="-",
        help="Text file to parse (default: stdin)",
    )
    parser.add_argument(
        "--year",
        type=int,
        default=None,
        help="Year for dates that omit one (default: current year)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )

    if args.file == "-":
        text = sys.stdin.read()
    else:
        try:
            with open(args.file, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            logger.error("Cannot read %s: %s", args.file, e)
            return 1

    events = segment(text, reference_year=args.year)
    logger.debug("Parsed %d event(s)", len(events))
    json.dump([e.to_dict() for e in events], sys.stdout, indent=2, ensure_ascii=False)
    sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
