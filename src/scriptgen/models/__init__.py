"""Model package for scriptgen."""

from scriptgen.models.command_options import DEFAULT_SHELL, CommandOptions
from scriptgen.models.generation import GenerationReply, GenerationRequest
from scriptgen.models.generation_result import GenerationResult
from scriptgen.models.scriptgen_config import (
    DEFAULT_ENDPOINT,
    DEFAULT_MODEL,
    EXPLAIN_TEMPLATE,
    GENERATE_TEMPLATE,
    ScriptgenConfig,
)

__all__ = [
    "CommandOptions",
    "DEFAULT_ENDPOINT",
    "DEFAULT_MODEL",
    "DEFAULT_SHELL",
    "EXPLAIN_TEMPLATE",
    "GENERATE_TEMPLATE",
    "GenerationReply",
    "GenerationRequest",
    "GenerationResult",
    "ScriptgenConfig",
]
