"""Domain models for converter configuration."""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict

from .errors import DEFAULT_ERROR_MARKER

CONFIG_VERSION = "1.0.0"


@dataclass(frozen=True)
class FormattingOptions:
    """Numeric output rules shared by the unit families."""

    significant_digits: int = 10
    temperature_decimals: int = 2


@dataclass(frozen=True)
class BatchOptions:
    """Line-oriented batch conversion."""

    max_workers: int = 4
    error_marker: str = DEFAULT_ERROR_MARKER


@dataclass(frozen=True)
class LoggingOptions:
    """Logger setup for the CLI and embedding applications."""

    level: str = "INFO"
    json_mode: bool = False


@dataclass(frozen=True)
class ConverterConfig:
    """Aggregated configuration."""

    version: str = CONFIG_VERSION
    formatting: FormattingOptions = field(default_factory=FormattingOptions)
    batch: BatchOptions = field(default_factory=BatchOptions)
    logging: LoggingOptions = field(default_factory=LoggingOptions)

    def to_dict(self) -> Dict[str, object]:
        """Convert the configuration into a JSON serialisable structure."""

        def dataclass_to_dict(obj):
            if hasattr(obj, "__dict__"):
                return {
                    key: dataclass_to_dict(value)
                    for key, value in obj.__dict__.items()
                }
            return obj

        return dataclass_to_dict(self)


def with_overrides(base_config: ConverterConfig, overrides: Dict[str, object]) -> ConverterConfig:
    """Create a new configuration with flat overrides applied.

    Keys are ``significant_digits``, ``temperature_decimals``, ``max_workers``,
    ``error_marker``, ``log_level`` and ``log_json``. ``None`` values are
    ignored.
    """

    formatting = base_config.formatting
    if any(overrides.get(key) is not None for key in ("significant_digits", "temperature_decimals")):
        formatting = FormattingOptions(
            significant_digits=int(overrides.get("significant_digits") or formatting.significant_digits),
            temperature_decimals=int(
                overrides["temperature_decimals"]
                if overrides.get("temperature_decimals") is not None
                else formatting.temperature_decimals
            ),
        )

    batch = base_config.batch
    if overrides.get("max_workers") is not None or overrides.get("error_marker") is not None:
        batch = BatchOptions(
            max_workers=int(overrides.get("max_workers") or batch.max_workers),
            error_marker=str(overrides.get("error_marker") or batch.error_marker),
        )

    logging_options = base_config.logging
    if overrides.get("log_level") is not None or overrides.get("log_json") is not None:
        logging_options = LoggingOptions(
            level=str(overrides.get("log_level") or logging_options.level).upper(),
            json_mode=bool(
                overrides["log_json"]
                if overrides.get("log_json") is not None
                else logging_options.json_mode
            ),
        )

    return ConverterConfig(
        version=base_config.version,
        formatting=formatting,
        batch=batch,
        logging=logging_options,
    )
