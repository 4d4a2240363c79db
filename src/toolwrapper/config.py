"""Configuration lookup for toolwrapper."""

import json
import logging
import os
import sys
from pathlib import Path

from pydantic import ValidationError

from toolwrapper.errors import (
    BadConfigurationError,
    InvalidConfigError,
    MissingConfigError,
    UnsupportedTargetError,
)
from toolwrapper.models import TargetEntry

log = logging.getLogger(__name__)

CONFIG_FILE_NAME = "DotnetToolWrapper.json"
TRUTHY_VALUES = {"1", "true", "yes", "on"}


def debug_enabled() -> bool:
    """Return whether TOOLWRAPPER_DEBUG asks for debug logging."""
    return os.environ.get("TOOLWRAPPER_DEBUG", "").strip().lower() in TRUTHY_VALUES


def executable_dir() -> Path:
    """Return the directory the launcher runs from.

    ``TOOLWRAPPER_DIR`` overrides detection. Frozen builds live next to
    ``sys.executable``; installed packages next to this module.
    """
    override = os.environ.get("TOOLWRAPPER_DIR", "").strip()
    if override:
        return Path(override).resolve()
    if getattr(sys, "frozen", False) and sys.executable:
        return Path(sys.executable).resolve().parent
    return Path(__file__).resolve().parent


def load_config(executable_dir: Path) -> dict:
    """Read DotnetToolWrapper.json from the executable directory."""
    config_path = Path(executable_dir) / CONFIG_FILE_NAME
    log.debug("config path: %s", config_path)
    if not config_path.is_file():
        raise MissingConfigError(config_path)

    try:
        with open(config_path, encoding="utf-8-sig") as f:
            data = json.load(f)
    except (OSError, UnicodeDecodeError) as e:
        raise InvalidConfigError(config_path, str(e)) from e
    except json.JSONDecodeError as e:
        raise InvalidConfigError(config_path, f"not valid JSON ({e})") from e

    if not isinstance(data, dict):
        raise InvalidConfigError(config_path, "top-level value must be a JSON object")
    log.debug("config targets: %s", sorted(data))
    return data


def resolve_program(config: dict, target: str) -> str:
    """Return the raw ``program`` value configured for the target."""
    if target not in config:
        raise UnsupportedTargetError(target)
    try:
        entry = TargetEntry.model_validate(config[target])
    except ValidationError as e:
        log.debug("entry for %s failed validation: %s", target, e)
        raise BadConfigurationError(target) from e
    return entry.program
