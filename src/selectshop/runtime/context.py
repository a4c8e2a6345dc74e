"""Application-wide configuration held in a context variable.

The configuration is loaded once at import. Code reads it through
:func:`get_config`; tests swap parts of it with :func:`with_context`.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel

from src.selectshop.runtime.config.config_data import ConfigData
from src.selectshop.runtime.config.config_template import load_templated_yaml
from src.selectshop.runtime.settings import EnvironmentVariables


@dataclass
class AppContext:
    config: ConfigData


def load_config(env: EnvironmentVariables | None = None) -> ConfigData:
    """Read the YAML file named by ``APP_CONFIG_FILE``, or fall back to defaults."""
    env = env or EnvironmentVariables()
    path = Path(env.config_file)
    if path.exists():
        return load_templated_yaml(path, env.environment)

    logger.warning("{} not found; using built-in defaults", path)
    config = ConfigData()
    config.app.environment = env.environment
    return config


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=AppContext(config=load_config())
)


def get_context() -> AppContext:
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    return _app_context.set(context)


def get_config() -> ConfigData:
    return get_context().config


def _explicit_values(model: BaseModel) -> dict[str, Any]:
    """Values assigned on ``model`` or any nested model, keyed like ``model_dump``.

    A nested section that was replaced wholesale is taken in full.
    """
    values: dict[str, Any] = {}
    for name in type(model).model_fields:
        value = getattr(model, name)
        if isinstance(value, BaseModel):
            nested = _explicit_values(value)
            if nested:
                values[name] = nested
            elif name in model.model_fields_set:
                values[name] = value.model_dump()
        elif name in model.model_fields_set:
            values[name] = value
    return values


def _overlay(base: dict[str, Any], changes: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in changes.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _overlay(merged[key], value)
        else:
            merged[key] = value
    return merged


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily overlay the fields set on ``config_override``.

    Example:
        override = ConfigData()
        override.product.min_my_price = 500
        with with_context(override):
            assert get_config().product.min_my_price == 500
    """
    if config_override is None:
        yield
        return
    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged = _overlay(get_config().model_dump(), _explicit_values(config_override))
    token = set_context(replace(get_context(), config=ConfigData.model_validate(merged)))
    try:
        yield
    finally:
        _app_context.reset(token)
