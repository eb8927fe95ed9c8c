"""Loading of the optional YAML configuration file."""

from __future__ import annotations

import logging
from pathlib import Path

import yaml
from pydantic import ValidationError

from shiftjis2utf8.application.options import RunConfig
from shiftjis2utf8.errors import ConfigError
from shiftjis2utf8.schemas import ConfigFileSchema

logger = logging.getLogger(__name__)

CONFIG_FILENAME = ".shiftjis2utf8.yaml"


def load_run_config(path: Path) -> RunConfig | None:
    """Load ``path`` into a :class:`RunConfig`.

    Parameters
    ----------
    path : Path
        Configuration file location.

    Returns
    -------
    RunConfig | None
        ``None`` when the file does not exist.

    Raises
    ------
    ConfigError
        If the file cannot be read, is not valid YAML, or fails validation.
    """
    try:
        text = path.read_text(encoding="utf-8")
    except FileNotFoundError:
        return None
    except OSError as exc:
        raise ConfigError(f"Failed to read config file {path}: {exc}") from exc

    try:
        loaded = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise ConfigError(f"Failed to parse config file {path}: {exc}") from exc

    if not isinstance(loaded, dict):
        raise ConfigError(f"Config file {path} must contain a mapping.")

    try:
        schema = ConfigFileSchema.model_validate(loaded)
    except ValidationError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc

    logger.debug("loaded config from %s: mode=%s", path, schema.mode)
    try:
        return schema.to_run_config()
    except ValueError as exc:
        raise ConfigError(f"Invalid config file {path}: {exc}") from exc
