"""Configuration model for scriptgen."""

from pydantic import BaseModel, ConfigDict

DEFAULT_MODEL = "llama3.2"
DEFAULT_ENDPOINT = "http://localhost:11434/api/generate"

GENERATE_TEMPLATE = "generate_command"
EXPLAIN_TEMPLATE = "explain_command"


class ScriptgenConfig(BaseModel):
    """Template set loaded from the config file; read-only once loaded."""

    model_config = ConfigDict(frozen=True)

    prompts: dict[str, str]
