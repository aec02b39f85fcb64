"""Result of one full generation run."""

from dataclasses import dataclass

from scriptgen.errors import ScriptgenError


@dataclass
class GenerationResult:
    """The extracted command, plus the explanation or the error that prevented it."""

    command: str
    explanation: str | None = None
    explanation_error: ScriptgenError | None = None
