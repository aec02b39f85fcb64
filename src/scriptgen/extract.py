"""Pull the payload out of free-form model output."""

import logging

from scriptgen.errors import ClosingTagNotFoundError, MarkerNotFoundError, OpeningTagNotFoundError

log = logging.getLogger(__name__)

COMMAND_MARKER = "COMMAND:"
EXPLANATION_OPEN = "<explanation>"
EXPLANATION_CLOSE = "</explanation>"


def extract_command(text: str, marker: str = COMMAND_MARKER) -> str:
    """Return the first line starting with marker, minus the marker, stripped."""
    for line in text.split("\n"):
        if line.startswith(marker):
            command = line[len(marker) :].strip()
            log.debug("extracted command: %r", command)
            return command
    raise MarkerNotFoundError(marker)


def extract_tagged(
    text: str, open_tag: str = EXPLANATION_OPEN, close_tag: str = EXPLANATION_CLOSE
) -> str:
    """Return the untrimmed text between the first open_tag and the next close_tag."""
    start = text.find(open_tag)
    if start == -1:
        raise OpeningTagNotFoundError(open_tag)
    start += len(open_tag)
    end = text.find(close_tag, start)
    if end == -1:
        raise ClosingTagNotFoundError(close_tag)
    log.debug("extracted %d chars between %s and %s", end - start, open_tag, close_tag)
    return text[start:end]
