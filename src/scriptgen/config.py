"""Configuration loading for scriptgen."""

import logging
import os
from pathlib import Path

import yaml
from pydantic import ValidationError

from scriptgen.errors import ConfigNotFoundError, ConfigParseError, MissingTemplateError
from scriptgen.models import EXPLAIN_TEMPLATE, GENERATE_TEMPLATE, ScriptgenConfig

log = logging.getLogger(__name__)

CONFIG_ENV_VAR = "SCRIPTGEN_CONFIG"
CONFIG_FILENAME = "config.yaml"
CONFIG_DIR = Path.home() / ".scriptgen"
CONFIG_FILE = CONFIG_DIR / CONFIG_FILENAME


def candidate_paths() -> list[Path]:
    """Return the locations searched when no config path is given explicitly."""
    paths = []
    env_path = os.environ.get(CONFIG_ENV_VAR)
    if env_path:
        paths.append(Path(env_path))
    paths.append(Path.cwd() / CONFIG_FILENAME)
    paths.append(CONFIG_FILE)
    return paths


def resolve_config_path(path: str | Path | None = None) -> Path:
    """Return the config file to load, raising when none exists."""
    if path is not None:
        path = Path(path)
        if not path.is_file():
            raise ConfigNotFoundError(f"config file not found: {path}")
        return path

    candidates = candidate_paths()
    for candidate in candidates:
        if candidate.is_file():
            log.debug("using config file %s", candidate)
            return candidate
    searched = ", ".join(str(c) for c in candidates)
    raise ConfigNotFoundError(f"no config file found (searched: {searched})")


def load_config(path: str | Path | None = None) -> ScriptgenConfig:
    """Load and validate the template set."""
    config_path = resolve_config_path(path)
    try:
        with open(config_path, encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except OSError as e:
        raise ConfigNotFoundError(f"could not read config file {config_path}: {e}") from e
    except yaml.YAMLError as e:
        raise ConfigParseError(f"error parsing config file {config_path}: {e}") from e
    except UnicodeDecodeError as e:
        raise ConfigParseError(f"config file {config_path} is not valid UTF-8: {e}") from e

    if not isinstance(data, dict):
        raise ConfigParseError(f"{config_path} is not a YAML mapping")
    try:
        config = ScriptgenConfig.model_validate(data)
    except ValidationError as e:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}" for err in e.errors()
        )
        raise ConfigParseError(f"invalid config file {config_path}: {problems}") from e

    log.debug("loaded templates: %s", ", ".join(sorted(config.prompts)))
    return config


def required_templates(explain: bool) -> list[str]:
    names = [GENERATE_TEMPLATE]
    if explain:
        names.append(EXPLAIN_TEMPLATE)
    return names


def require_templates(config: ScriptgenConfig, explain: bool = False) -> None:
    """Raise MissingTemplateError for the first required template that is absent."""
    for name in required_templates(explain):
        if name not in config.prompts:
            raise MissingTemplateError(name)
