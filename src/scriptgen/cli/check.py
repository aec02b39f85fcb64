"""`scriptgen check` command implementation."""

import argparse
import sys

from scriptgen.cli.shared import add_common_arguments, configure_logging
from scriptgen.config import load_config, require_templates, resolve_config_path
from scriptgen.errors import ScriptgenError, TemplateSyntaxError
from scriptgen.template import parse


def build_parser() -> argparse.ArgumentParser:
    """Build parser for the check command."""
    parser = argparse.ArgumentParser(
        prog="scriptgen check",
        description="Load the template config and verify every template parses",
    )
    add_common_arguments(parser)
    return parser


def run(argv: list[str]) -> int:
    """Execute the check command."""
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.debug)

    try:
        path = resolve_config_path(args.config)
        config = load_config(path)
        require_templates(config)
    except ScriptgenError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    print(f"Config: {path}")
    failed = False
    for name, body in sorted(config.prompts.items()):
        try:
            fields = sorted({p.name for p in parse(body)})
        except TemplateSyntaxError as e:
            print(f"Error: template '{name}': {e}", file=sys.stderr)
            failed = True
            continue
        print(f"  {name}: {', '.join('.' + f for f in fields) or '(no placeholders)'}")
    return 1 if failed else 0
