"""Shared fixtures: template sets and config files."""

from pathlib import Path

import pytest

GENERATE_BODY = "Shell: {{.Shell}} Request: {{.UserInput}}"
EXPLAIN_BODY = "Explain: {{.Command}}"

CONFIG_YAML = f"""\
prompts:
  generate_command: "{GENERATE_BODY}"
  explain_command: "{EXPLAIN_BODY}"
"""


@pytest.fixture
def templates() -> dict[str, str]:
    return {"generate_command": GENERATE_BODY, "explain_command": EXPLAIN_BODY}


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    path = tmp_path / "config.yaml"
    path.write_text(CONFIG_YAML, encoding="utf-8")
    return path
