"""md2deck — Compile a markdown presentation into the JSON deck the presenter loads."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .parser import parse_file

logger = logging.getLogger(__name__)


def main() -> None:
    parser = argparse.ArgumentParser(
        prog="md2deck",
        description="Compile a markdown presentation into a JSON slide deck.",
    )
    parser.add_argument("input", help="Path to the markdown file")
    parser.add_argument("--output", "-o",
                        help="Write the JSON deck here instead of stdout")
    parser.add_argument("--indent", type=int, default=None,
                        help="Indent the JSON output by this many spaces")
    parser.add_argument("--live", action="store_true",
                        help="Mark the deck for live audience sync")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Log parsing details to stderr")

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
    logger.info("CLI arguments: %s", vars(args))

    input_path = Path(args.input)
    if not input_path.exists():
        print(f"Error: {input_path} not found.", file=sys.stderr)
        sys.exit(1)

    deck = parse_file(str(input_path))
    payload = deck.to_json(live=args.live, indent=args.indent)

    if args.output:
        output_path = Path(args.output)
        output_path.write_text(payload + "\n", encoding="utf-8")
        print(f"Wrote {deck.slide_count} slides to {output_path}", file=sys.stderr)
    else:
        print(payload)


if __name__ == "__main__":
    main()
