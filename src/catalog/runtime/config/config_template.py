"""Loading of ``config.yaml`` with environment placeholders."""

import os
import re
from pathlib import Path

import yaml
from loguru import logger
from pydantic_core import ValidationError

from src.catalog.runtime.config.config_data import ConfigData
from src.catalog.runtime.settings import EnvironmentVariables

# ${NAME}, ${NAME:-default} or ${NAME:?message}
_PLACEHOLDER = re.compile(r"\$\{(?P<name>[^}:]+)(?:(?P<op>:[-?])(?P<arg>[^}]*))?\}")


def substitute_env_vars(text: str) -> str:
    """Replace every environment placeholder in ``text``.

    ``${NAME:-default}`` falls back to ``default`` when ``NAME`` is unset;
    ``${NAME}`` and ``${NAME:?message}`` raise ``ValueError`` instead.
    """

    def resolve(match: re.Match[str]) -> str:
        name, op, arg = match.group("name", "op", "arg")
        value = os.getenv(name)
        if value is not None:
            return value
        if op == ":-":
            return arg
        if op == ":?":
            raise ValueError(f"Required environment variable {name}: {arg}")
        raise ValueError(f"Required environment variable {name} not set")

    return _PLACEHOLDER.sub(resolve, text)


def apply_environment_overrides(env_mode: str) -> list[str]:
    """Export every ``<ENV>_FOO`` variable as ``FOO`` for the active environment.

    Returns the names of the variables that were set.
    """
    prefix = f"{env_mode.upper()}_"
    applied = []
    for var_name, var_value in list(os.environ.items()):
        if not var_name.startswith(prefix) or var_name == prefix:
            continue
        new_var_name = var_name[len(prefix):]
        os.environ[new_var_name] = var_value
        applied.append(new_var_name)
        logger.debug("Set environment variable {} from {}", new_var_name, var_name)
    return applied


def load_templated_yaml(file_path: Path) -> ConfigData:
    """
    Load a YAML file with environment variable substitution.

    Args:
        file_path: Path to the YAML file

    Returns:
        Parsed configuration with environment variables substituted. A missing
        file yields the default configuration.

    Raises:
        ValueError: If required environment variables are missing or the
            file does not describe a valid configuration
    """
    if not file_path.exists():
        logger.warning("Configuration file {} not found; using defaults", file_path)
        return ConfigData()

    content = file_path.read_text()

    env_mode = EnvironmentVariables().environment
    logger.info("Loading configuration for environment: {}", env_mode)
    applied = apply_environment_overrides(env_mode)
    if applied:
        logger.info("Applied environment-specific overrides: {}", applied)

    substituted_content = substitute_env_vars(content)

    try:
        loaded = yaml.safe_load(substituted_content)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not loaded:
        raise ValueError("Failed to parse YAML")

    try:
        return ConfigData(**(loaded.get("config") or {}))
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e
