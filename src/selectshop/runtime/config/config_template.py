"""Environment variable substitution for config.yaml."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.selectshop.runtime.config.config_data import ConfigData

PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def _resolve(expression: str) -> str:
    if ":-" in expression:
        name, default = expression.split(":-", 1)
        return os.getenv(name, default)

    name, _, message = expression.partition(":?")
    value = os.getenv(name)
    if value is not None:
        return value
    if message:
        raise ValueError(f"Required environment variable {name}: {message}")
    raise ValueError(f"Required environment variable {name} not set")


def substitute_env_vars(text: str) -> str:
    """Replace ``${VAR}``, ``${VAR:-default}`` and ``${VAR:?message}`` placeholders.

    Raises:
        ValueError: A variable without a default is not set.
    """
    return PLACEHOLDER.sub(lambda match: _resolve(match.group(1)), text)


def _promote_prefixed_env(env_mode: str) -> None:
    # TEST_DATABASE_URL shadows DATABASE_URL when running in the test environment
    prefix = f"{env_mode.upper()}_"
    for name, value in list(os.environ.items()):
        if name.startswith(prefix):
            os.environ[name[len(prefix):]] = value
            logger.debug("Using {} for {}", name, name[len(prefix):])


def parse_config(content: str, env_mode: str = "development") -> ConfigData:
    """Substitute environment variables in raw YAML text and validate it.

    Raises:
        ValueError: The YAML is malformed or empty, a required variable is
            missing, or the result does not validate against ``ConfigData``.
    """
    _promote_prefixed_env(env_mode)

    try:
        document = yaml.safe_load(substitute_env_vars(content))
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not document:
        raise ValueError("Failed to parse YAML: document is empty")

    try:
        config = ConfigData(**(document.get("config") or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e

    config.app.environment = env_mode
    return config


def load_templated_yaml(file_path: Path, env_mode: str = "development") -> ConfigData:
    """Load and validate a config file.

    Raises:
        FileNotFoundError: ``file_path`` does not exist.
        ValueError: See :func:`parse_config`.
    """
    content = Path(file_path).read_text(encoding="utf-8")
    logger.info("Loading configuration from {} for environment: {}", file_path, env_mode)
    return parse_config(content, env_mode)
