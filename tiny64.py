"""Tiny64 - Time-Ordered Compact Unique IDs.

Prints one 11-character, time-sortable identifier per invocation.
"""

import argparse
import sys

from config import Config
from core.errors import ClockError
from generation.generator import generate_id
from internal.logging import StructuredLogger, get_logger, parse_level
from utils.crash import configure as configure_crash, install_crash_handler

DESCRIPTION = """\
Tiny64 is a compact 64-bit identifier format for systems that need
time-sortable unique IDs with low collision probability and cheap generation.

features:
  - Short: only 11 characters (URL-safe base64 alphabet)
  - Time-sortable: IDs sort chronologically as plain strings
  - Low collision rate: timestamp + sequence + randomness
  - Multi-process safe: no coordination, randomness separates processes
"""

EPILOG = """\
format:
  [ 42 bits: timestamp (ms since Unix epoch) ]
  [ 12 bits: sequence number                ]
  [ 10 bits: randomness                     ]

alphabet (ascending ASCII, so string order = numeric order):
  -0123456789ABCDEFGHIJKLMNOPQRSTUVWXYZ_abcdefghijklmnopqrstuvwxyz

examples:
  $ tiny64
  Obrl8O3--Cw

  $ for i in {1..3}; do tiny64; done
  Obrl8O3--Cw
  Obrl8O3-0QB
  Obrl8O3-19o
"""

EXIT_SUCCESS = 0
EXIT_CLOCK_ERROR = 1


def build_parser():
    return argparse.ArgumentParser(
        prog="tiny64",
        usage="%(prog)s [-h]",
        description=DESCRIPTION,
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )


def main(argv=None, config=None):
    config = config or Config()
    build_parser().parse_args(argv)

    StructuredLogger.configure(min_level=parse_level(config.logging.level))
    configure_crash(config.logging.crash_file)
    install_crash_handler()

    try:
        identifier = generate_id()
    except ClockError as exc:
        get_logger().error("cannot generate id", error=exc, error_id=exc.error_id, **exc.context)
        return EXIT_CLOCK_ERROR

    print(identifier)
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
