"""Top-level CLI router."""

import sys

from . import check as check_cmd
from . import query as query_cmd


def _is_check(args: list[str]) -> bool:
    """Return whether args name the check subcommand rather than a request starting "check"."""
    if not args or args[0] != "check":
        return False
    _, extra = check_cmd.build_parser().parse_known_args(args[1:])
    return not extra


def main(argv: list[str] | None = None) -> int:
    """Route to one-shot query mode or config check mode."""
    args = list(sys.argv[1:] if argv is None else argv)
    if _is_check(args):
        return check_cmd.run(args[1:])
    return query_cmd.run(args)


def entrypoint() -> None:
    """Console script entrypoint."""
    raise SystemExit(main())
