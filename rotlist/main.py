"""Demo CLI: print a phrase endlessly, one character at a time.

The walk uses only ``peek_head``/``forward``, the same way a caller would
consume a rotating list by hand. A lap ends whenever the pointer wraps back
to 1.
"""
from __future__ import annotations

import argparse
import logging
import sys
import time
from pathlib import Path
from typing import Optional, Sequence, TextIO

from rotlist.config.loader import get_settings, load_settings, use_settings
from rotlist.config.models import LoggingSettings
from rotlist.core.errors import RotatingListError
from rotlist.rotation.rotating_list import RotatingList
from rotlist.telemetry.logging_setup import configure_from_settings

DEFAULT_PHRASE = "hello world! "


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rotlist-demo",
        description="Print a phrase through a rotating list, character by character.",
    )
    parser.add_argument("phrase", nargs="?", default=DEFAULT_PHRASE, help="text to cycle through")
    parser.add_argument("--laps", type=int, default=5, help="number of full passes (default: 5)")
    parser.add_argument("--delay", type=float, default=0.2, help="seconds between characters")
    parser.add_argument("--config", type=Path, default=None, help="YAML settings file")
    parser.add_argument("--log-level", default=None, help="override the configured log level")
    return parser


def run_demo(
    phrase: str,
    *,
    laps: int,
    delay: float = 0.0,
    out: Optional[TextIO] = None,
    logger: Optional[logging.Logger] = None,
) -> int:
    """Write ``laps`` passes of ``phrase`` to ``out``; return characters written."""

    if out is None:
        out = sys.stdout
    rlist = RotatingList.new(phrase)
    written = 0
    remaining = laps
    while remaining > 0:
        out.write(str(rlist.peek_head()))
        out.flush()
        written += 1
        if delay:
            time.sleep(delay)
        rlist = rlist.forward()
        if rlist.pointer == 1:
            remaining -= 1
            if logger is not None:
                logger.debug("Lap completed", extra={"laps_left": remaining})
    out.write("\n")
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)
    if args.laps < 0 or args.delay < 0:
        parser.error("--laps and --delay must be non-negative")

    try:
        settings = load_settings(args.config) if args.config else get_settings()
        use_settings(settings)
        logging_settings = settings.logging
        if args.log_level:
            logging_settings = LoggingSettings.model_validate(
                {**logging_settings.model_dump(), "level": args.log_level}
            )
        logger = configure_from_settings(logging_settings)
        logger.info("Demo started", extra={"laps": args.laps, "phrase_length": len(args.phrase)})
        run_demo(args.phrase, laps=args.laps, delay=args.delay, logger=logger)
    except (RotatingListError, ValueError) as exc:
        print(f"rotlist-demo: {exc}", file=sys.stderr)
        return 2
    except KeyboardInterrupt:
        sys.stdout.write("\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())
