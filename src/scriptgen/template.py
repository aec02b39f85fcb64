"""Prompt template rendering.

Templates use Go-style field actions, e.g. ``Shell: {{.Shell}}``. Only field
substitution is supported; any other action is a syntax error.
"""

import logging
import re
from dataclasses import dataclass

from scriptgen.errors import TemplateRenderError, TemplateSyntaxError

log = logging.getLogger(__name__)

ACTION_OPEN = "{{"
ACTION_CLOSE = "}}"
FIELD_RE = re.compile(r"\s*\.([A-Za-z_][A-Za-z0-9_]*)\s*")


@dataclass(frozen=True)
class Placeholder:
    name: str
    start: int
    end: int


def _line_of(body: str, pos: int) -> int:
    return body.count("\n", 0, pos) + 1


def parse(body: str) -> list[Placeholder]:
    """Return the placeholders in a template body, in order of appearance."""
    placeholders: list[Placeholder] = []
    pos = 0
    while True:
        start = body.find(ACTION_OPEN, pos)
        if start == -1:
            return placeholders
        end = body.find(ACTION_CLOSE, start + len(ACTION_OPEN))
        if end == -1:
            raise TemplateSyntaxError(f"line {_line_of(body, start)}: unclosed action")
        inner = body[start + len(ACTION_OPEN) : end]
        match = FIELD_RE.fullmatch(inner)
        if match is None:
            raise TemplateSyntaxError(
                f"line {_line_of(body, start)}: unsupported action {{{{{inner}}}}}"
            )
        pos = end + len(ACTION_CLOSE)
        placeholders.append(Placeholder(match.group(1), start, pos))


def render(body: str, variables: dict[str, str]) -> str:
    """Substitute every placeholder in body with its value from variables."""
    placeholders = parse(body)
    parts: list[str] = []
    pos = 0
    for placeholder in placeholders:
        if placeholder.name not in variables:
            raise TemplateRenderError(f"no value for placeholder .{placeholder.name}")
        parts.append(body[pos : placeholder.start])
        parts.append(variables[placeholder.name])
        pos = placeholder.end
    parts.append(body[pos:])
    text = "".join(parts)
    log.debug("rendered %d placeholders into %d chars", len(placeholders), len(text))
    return text
