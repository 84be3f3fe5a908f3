"""Configuration loading.

Merge order (later wins):
    1. Built-in defaults (``ConverterConfig()``)
    2. Optional JSON or YAML file named by ``FORMAT_CONVERTER_CONFIG``
       (or passed explicitly)
    3. Environment variables ``FORMAT_CONVERTER_<KEY>``
    4. In-code overrides

File structure example::

    formatting:
      significant_digits: 8
      temperature_decimals: 1
    batch:
      max_workers: 2
    logging:
      level: DEBUG
      json_mode: true

Malformed values are skipped with a warning; they never abort loading.
"""
from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

import yaml

from .domain.configuration import ConverterConfig, with_overrides

logger = logging.getLogger(__name__)

CONFIG_ENV_VAR = "FORMAT_CONVERTER_CONFIG"
ENV_PREFIX = "FORMAT_CONVERTER_"

_TRUE = {"1", "true", "yes", "on"}
_FALSE = {"0", "false", "no", "off"}


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ValueError(f"not a boolean: {value!r}")


def _parse_positive_int(value: Any) -> int:
    number = int(value)
    if number < 1:
        raise ValueError(f"must be at least 1: {value!r}")
    return number


def _parse_non_negative_int(value: Any) -> int:
    number = int(value)
    if number < 0:
        raise ValueError(f"must not be negative: {value!r}")
    return number


def _parse_marker(value: Any) -> str:
    marker = str(value)
    try:
        marker.format(code="decode", message="sample")
    except (AttributeError, KeyError, IndexError, ValueError) as exc:
        raise ValueError(f"error marker may only use {{code}} and {{message}}: {value!r}") from exc
    return marker


def _parse_level(value: Any) -> str:
    level = str(value).strip().upper()
    if not isinstance(logging.getLevelName(level), int):
        raise ValueError(f"unknown log level: {value!r}")
    return level


# flat override key -> validator
FIELD_PARSERS: Dict[str, Callable[[Any], Any]] = {
    "significant_digits": _parse_positive_int,
    "temperature_decimals": _parse_non_negative_int,
    "max_workers": _parse_positive_int,
    "error_marker": _parse_marker,
    "log_level": _parse_level,
    "log_json": _parse_bool,
}

# file section -> {file key: flat override key}
FILE_SECTIONS: Dict[str, Dict[str, str]] = {
    "formatting": {
        "significant_digits": "significant_digits",
        "temperature_decimals": "temperature_decimals",
    },
    "batch": {"max_workers": "max_workers", "error_marker": "error_marker"},
    "logging": {"level": "log_level", "json_mode": "log_json"},
}


def _validated(raw: Mapping[str, Any], source: str) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for key, value in raw.items():
        if value is None:
            continue
        parser = FIELD_PARSERS.get(key)
        if parser is None:
            logger.warning("Ignoring unknown setting %r from %s", key, source)
            continue
        try:
            values[key] = parser(value)
        except (TypeError, ValueError) as exc:
            logger.warning("Ignoring malformed setting %r from %s: %s", key, source, exc)
    return values


def _read_file(path: Path) -> Dict[str, Any]:
    """Read a JSON or YAML config file into flat override keys."""
    if not path.is_file():
        logger.warning("Config file %s not found; using defaults", path)
        return {}
    text = path.read_text(encoding="utf-8")
    try:
        if path.suffix.lower() == ".json":
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        logger.warning("Config file %s is malformed: %s", path, exc)
        return {}
    if data is None:
        return {}
    if not isinstance(data, dict):
        logger.warning("Config file %s must hold a mapping", path)
        return {}

    flat: Dict[str, Any] = {}
    for section, fields in FILE_SECTIONS.items():
        block = data.get(section) or {}
        if not isinstance(block, dict):
            logger.warning("Config section %r in %s must be a mapping", section, path)
            continue
        for file_key, value in block.items():
            key = fields.get(file_key)
            if key is None:
                logger.warning("Ignoring unknown setting %s.%s in %s", section, file_key, path)
                continue
            flat[key] = value
    return _validated(flat, str(path))


def _env_overrides(environ: Mapping[str, str]) -> Dict[str, Any]:
    raw = {
        key: environ[f"{ENV_PREFIX}{key.upper()}"]
        for key in FIELD_PARSERS
        if f"{ENV_PREFIX}{key.upper()}" in environ
    }
    return _validated(raw, "environment")


def load_config(
    path: Optional[Union[str, Path]] = None,
    overrides: Optional[Dict[str, Any]] = None,
    environ: Optional[Mapping[str, str]] = None,
) -> ConverterConfig:
    """
    Return the merged converter configuration.

    Args:
        path: Config file; defaults to ``$FORMAT_CONVERTER_CONFIG`` when set
        overrides: Flat keys applied last (see ``with_overrides``)
        environ: Environment mapping, ``os.environ`` by default

    Returns:
        ConverterConfig
    """
    environ = os.environ if environ is None else environ
    merged: Dict[str, Any] = {}

    file_path = path or environ.get(CONFIG_ENV_VAR)
    if file_path:
        merged.update(_read_file(Path(file_path)))

    merged.update(_env_overrides(environ))

    if overrides:
        merged.update(_validated(overrides, "overrides"))

    return with_overrides(ConverterConfig(), merged)


__all__ = ["load_config", "CONFIG_ENV_VAR", "ENV_PREFIX"]
