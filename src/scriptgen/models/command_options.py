"""Per-invocation options for command generation."""

from dataclasses import dataclass

DEFAULT_SHELL = "bash"


@dataclass(frozen=True)
class CommandOptions:
    """What the user asked for on the command line, besides the request text."""

    shell: str = DEFAULT_SHELL
    explain: bool = False
