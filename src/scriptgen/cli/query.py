"""One-shot query CLI implementation."""

import argparse
import sys

from scriptgen import __version__
from scriptgen.cli.shared import add_common_arguments, configure_logging
from scriptgen.config import load_config, require_templates
from scriptgen.errors import ScriptgenError
from scriptgen.models import DEFAULT_SHELL, CommandOptions
from scriptgen.scriptgen import CommandGenerator
from scriptgen.wait_indicator import WaitIndicator


def build_parser() -> argparse.ArgumentParser:
    """Build parser for one-shot query mode."""
    parser = argparse.ArgumentParser(
        prog="scriptgen",
        description="Turn a natural-language request into a shell command using a local LLM",
    )
    parser.add_argument(
        "-V",
        "--version",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    add_common_arguments(parser)
    parser.add_argument(
        "-s",
        "--shell",
        default=DEFAULT_SHELL,
        help=f"Shell to generate the command for (default: {DEFAULT_SHELL})",
    )
    parser.add_argument(
        "-e",
        "--explain",
        action="store_true",
        help="Ask the model to explain the generated command",
    )
    parser.add_argument(
        "words",
        nargs="+",
        metavar="request",
        help="What you want the command to do, in plain language",
    )
    return parser


def run(argv: list[str]) -> int:
    """Execute one-shot query mode."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    options = CommandOptions(shell=args.shell, explain=args.explain)
    request = " ".join(args.words)

    try:
        config = load_config(args.config)
        require_templates(config, explain=options.explain)
        generator = CommandGenerator(config.prompts, indicator_factory=WaitIndicator)
        command = generator.generate(request, options.shell)
    except ScriptgenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    if not command:
        print("Warning: Generated command is empty.", file=sys.stderr)
    print(command, flush=True)

    if not options.explain:
        return 0

    try:
        explanation = generator.explain(command)
    except ScriptgenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    except KeyboardInterrupt:
        return 130

    print(explanation)
    return 0
