"""Process-wide configuration with scoped overrides.

The configuration loaded from ``config.yaml`` at import time is the root of a
``ContextVar``. ``with_context`` layers a partial ``ConfigData`` on top of it
for the duration of a block (tests, CLI commands); only the fields the
override sets explicitly replace inherited values.
"""

from contextlib import contextmanager
from contextvars import ContextVar
from dataclasses import dataclass, replace
from typing import Any

from pydantic import BaseModel

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.config.config_template import load_templated_yaml
from src.catalog.runtime.settings import EnvironmentVariables

# Computed from other fields and re-derived after validation
_DERIVED_FIELDS = {"database": {"password", "connection_string"}}


@dataclass(frozen=True)
class AppContext:
    """Application-wide state visible to the current execution context."""

    config: ConfigData


_current: ContextVar[AppContext] = ContextVar(
    "catalog_context",
    default=AppContext(config=load_templated_yaml(EnvironmentVariables().config_file)),
)


def get_config() -> ConfigData:
    """Configuration for the current context."""
    return _current.get().config


def set_config(config: ConfigData) -> None:
    """Replace the configuration for the rest of the current context."""
    _current.set(replace(_current.get(), config=config))


def _explicit_values(model: BaseModel) -> dict[str, Any]:
    """Collect the values a model was given explicitly, nested models included.

    A nested model contributes its own explicit values; when none were set but
    the nested model itself was passed, it contributes a full dump.
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


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> dict[str, Any]:
    merged = dict(base)
    for key, value in overrides.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


def overlay_config(base: ConfigData, override: ConfigData) -> ConfigData:
    """Return ``base`` with the explicitly set parts of ``override`` applied."""
    merged = _deep_merge(
        base.model_dump(exclude=_DERIVED_FIELDS), _explicit_values(override)
    )
    return ConfigData.model_validate(merged)


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Run a block with ``config_override`` layered over the current config.

    Example:
        with with_context(ConfigData(app=AppConfig(environment="test"))):
            assert get_config().app.environment == "test"
    """
    if config_override is None:
        yield
        return
    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData or None, got {type(config_override)}"
        )

    context = _current.get()
    token = _current.set(
        replace(context, config=overlay_config(context.config, config_override))
    )
    try:
        yield
    finally:
        _current.reset(token)
