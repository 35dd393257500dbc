"""Process-wide application context.

The active ``ConfigData`` lives in a ``ContextVar`` so tests and one-off
commands can swap it for the duration of a block with ``with_context``.
"""

import os
from collections.abc import Iterator
from contextlib import contextmanager
from contextvars import ContextVar, Token
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from loguru import logger
from pydantic import BaseModel

from user_registry.runtime.config.config_data import ConfigData
from user_registry.runtime.config.config_template import load_templated_yaml


@dataclass
class AppContext:
    config: ConfigData


def load_default_config() -> ConfigData:
    """Load config.yaml (or ``APP_CONFIG_FILE``), falling back to defaults."""
    config_path = Path(os.getenv("APP_CONFIG_FILE", "config.yaml"))
    if not config_path.exists():
        logger.warning(
            "Configuration file {} not found; using built-in defaults", config_path
        )
        return ConfigData()
    return load_templated_yaml(config_path)


_app_context: ContextVar[AppContext] = ContextVar(
    "app_context", default=AppContext(config=load_default_config())
)


def get_context() -> AppContext:
    return _app_context.get()


def set_context(context: AppContext) -> Token[AppContext]:
    return _app_context.set(context)


def get_config() -> ConfigData:
    """Shortcut for ``get_context().config``."""
    return _app_context.get().config


def set_config(config: ConfigData) -> None:
    """Replace the whole configuration of the current context."""
    set_context(replace(get_context(), config=config))


def _explicit_fields(model: BaseModel) -> dict[str, Any]:
    """Collect the fields that were set on ``model``, descending into submodels.

    A submodel left at its defaults contributes nothing unless the parent
    assigned it explicitly, in which case it is taken whole.
    """
    explicit: dict[str, Any] = {}
    for name in type(model).model_fields:
        value = getattr(model, name)
        if isinstance(value, BaseModel):
            nested = _explicit_fields(value)
            if nested:
                explicit[name] = nested
            elif name in model.model_fields_set:
                explicit[name] = value.model_dump()
        elif name in model.model_fields_set:
            explicit[name] = value
    return explicit


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(current, dict) and isinstance(value, dict):
            merged[key] = _deep_merge(current, value)
        else:
            merged[key] = value
    return merged


@contextmanager
def with_context(config_override: ConfigData | None = None) -> Iterator[None]:
    """Temporarily layer ``config_override`` over the current configuration.

    Only fields explicitly set on the override take effect; everything
    else is inherited from the enclosing context.

    Example:
        override = ConfigData(pagination=PaginationConfig(default_limit=10))
        with with_context(override):
            assert get_config().pagination.default_limit == 10
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    current = get_context()
    merged = ConfigData.model_validate(
        _deep_merge(current.config.model_dump(), _explicit_fields(config_override))
    )
    token = set_context(replace(current, config=merged))
    try:
        yield
    finally:
        _app_context.reset(token)
