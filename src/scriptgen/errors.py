"""Exception hierarchy for scriptgen.

Every failure the pipeline can report is a ScriptgenError. The CLI catches the
base class, prints a one-line diagnostic and exits non-zero.
"""

MAX_BODY_PREVIEW = 500


def _preview(body: str) -> str:
    if len(body) > MAX_BODY_PREVIEW:
        return body[:MAX_BODY_PREVIEW] + "..."
    return body


class ScriptgenError(Exception):
    """Base class for all scriptgen failures."""


# Configuration


class ConfigError(ScriptgenError):
    """The template file is missing, malformed or incomplete."""


class ConfigNotFoundError(ConfigError):
    pass


class ConfigParseError(ConfigError):
    pass


class MissingTemplateError(ConfigError):
    def __init__(self, name: str) -> None:
        super().__init__(f"template '{name}' is not defined in the config prompts")
        self.name = name


# Templates


class TemplateError(ScriptgenError):
    """A prompt template could not be parsed or rendered."""


class TemplateSyntaxError(TemplateError):
    pass


class TemplateRenderError(TemplateError):
    pass


# Transport


class InferenceUnavailableError(ScriptgenError):
    def __init__(self, endpoint: str, reason: str) -> None:
        super().__init__(f"inference server at {endpoint} is unavailable: {reason}")
        self.endpoint = endpoint


# Protocol


class ProtocolError(ScriptgenError):
    """The server answered, but not with a usable generation."""

    def __init__(self, message: str, body: str = "") -> None:
        if body:
            message = f"{message} (raw body: {_preview(body)!r})"
        super().__init__(message)
        self.body = body


class EmptyReplyError(ProtocolError):
    def __init__(self) -> None:
        super().__init__("received empty response from inference server")


class ReplyDecodeError(ProtocolError):
    pass


class EmptyGenerationError(ProtocolError):
    def __init__(self, body: str = "") -> None:
        super().__init__("LLM returned an empty response", body)


class InferenceStatusError(ProtocolError):
    def __init__(self, status_code: int, body: str) -> None:
        super().__init__(f"inference server returned HTTP {status_code}", body)
        self.status_code = status_code


# Extraction


class ExtractionError(ScriptgenError):
    """The model reply did not follow the expected output convention."""


class MarkerNotFoundError(ExtractionError):
    def __init__(self, marker: str) -> None:
        super().__init__(f"no line starting with {marker!r} found in response")
        self.marker = marker


class OpeningTagNotFoundError(ExtractionError):
    def __init__(self, tag: str) -> None:
        super().__init__(f"opening tag {tag!r} not found in response")
        self.tag = tag


class ClosingTagNotFoundError(ExtractionError):
    def __init__(self, tag: str) -> None:
        super().__init__(f"closing tag {tag!r} not found in response")
        self.tag = tag
