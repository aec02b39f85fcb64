"""scriptgen: natural-language requests to shell commands via a local LLM."""

__version__ = "0.1.0"
