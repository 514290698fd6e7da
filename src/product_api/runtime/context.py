"""Active configuration, scoped per execution context."""

from contextlib import contextmanager
from contextvars import ContextVar

from pydantic import BaseModel

from src.product_api.runtime.config.config_data import ConfigData
from src.product_api.runtime.config.config_template import load_config

_active_config: ContextVar[ConfigData] = ContextVar(
    "active_config", default=load_config()
)


def _explicit_fields(model: BaseModel) -> dict:
    """Dump only the fields set on ``model``, descending into nested models."""
    explicit = {}
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


def _deep_merge(base: dict, override: dict) -> dict:
    merged = dict(base)
    for key, value in override.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = _deep_merge(merged[key], value)
        else:
            merged[key] = value
    return merged


@contextmanager
def with_context(config_override: ConfigData | None = None):
    """Temporarily apply ``config_override`` on top of the active configuration.

    Only the fields the override sets explicitly are applied, so a partial
    override inherits everything else.

    Example:
        override = ConfigData()
        override.database.url = "sqlite://"
        with with_context(override):
            assert get_config().database.url == "sqlite://"
    """
    if config_override is None:
        yield
        return

    if not isinstance(config_override, ConfigData):
        raise ValueError(
            f"config_override must be ConfigData, or None, got {type(config_override)}"
        )

    merged = _deep_merge(get_config().model_dump(), _explicit_fields(config_override))
    token = _active_config.set(ConfigData.model_validate(merged))
    try:
        yield
    finally:
        _active_config.reset(token)


def get_config() -> ConfigData:
    return _active_config.get()
