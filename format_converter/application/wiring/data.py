"""Structured data documents."""
from ...domain.configuration import FormattingOptions
from ...domain.format_ids import FormatId as F
from ...infrastructure.structured_data import document_converter
from ..registry import RegistryBuilder

DOCUMENT_EDGES = (
    (F.JSON, F.JSON_MIN), (F.JSON_MIN, F.JSON),
    (F.JSON, F.CSV), (F.CSV, F.JSON),
    (F.CSV, F.TSV), (F.TSV, F.CSV),
    (F.JSON, F.TSV), (F.TSV, F.JSON),
    (F.TSV, F.YAML), (F.TSV, F.XML),
    (F.JSON, F.YAML), (F.YAML, F.JSON),
    (F.JSON, F.TOML), (F.TOML, F.JSON),
    (F.JSON, F.QUERYSTRING), (F.QUERYSTRING, F.JSON),
    (F.YAML, F.CSV), (F.CSV, F.YAML),
    (F.XML, F.JSON), (F.JSON, F.XML),
    (F.XML, F.YAML),
    (F.TOML, F.YAML), (F.YAML, F.TOML),
    (F.JSON_MIN, F.YAML), (F.YAML, F.JSON_MIN),
    (F.JSON_MIN, F.CSV), (F.JSON_MIN, F.TOML),
    (F.CSV, F.TOML), (F.TOML, F.CSV),
    (F.QUERYSTRING, F.YAML), (F.YAML, F.QUERYSTRING),
    (F.QUERYSTRING, F.TOML), (F.TOML, F.QUERYSTRING),
    (F.JSON_MIN, F.QUERYSTRING), (F.QUERYSTRING, F.JSON_MIN),
    (F.JSON_MIN, F.XML), (F.XML, F.JSON_MIN),
    (F.CSV, F.XML), (F.XML, F.CSV),
)


def register(builder: RegistryBuilder, formatting: FormattingOptions) -> None:
    for source, target in DOCUMENT_EDGES:
        builder.register(source, target, document_converter(source.value, target.value))
