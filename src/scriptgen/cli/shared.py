"""Helpers shared by the CLI commands."""

import argparse
import logging


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "-c",
        "--config",
        metavar="PATH",
        help="Template config file (default: $SCRIPTGEN_CONFIG, ./config.yaml, "
        "~/.scriptgen/config.yaml)",
    )


def configure_logging(debug: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(name)s %(levelname)s: %(message)s",
    )
