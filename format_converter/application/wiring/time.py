"""Timestamps and calendar dates."""
from ...domain.configuration import FormattingOptions
from ...domain.format_ids import FormatId as F
from ...infrastructure import timestamps as ts
from ..registry import RegistryBuilder


def register(builder: RegistryBuilder, formatting: FormattingOptions) -> None:
    builder.register(F.TIMESTAMP, F.ISO_DATE, ts.timestamp_to_iso)
    builder.register(F.TIMESTAMP, F.HUMAN_DATE, ts.timestamp_to_human)
    builder.register(F.ISO_DATE, F.TIMESTAMP, ts.date_to_timestamp)
    builder.register(F.ISO_DATE, F.HUMAN_DATE, ts.date_to_human)
    builder.register(F.HUMAN_DATE, F.TIMESTAMP, ts.date_to_timestamp)
    builder.register(F.HUMAN_DATE, F.ISO_DATE, ts.date_to_iso)
    builder.register(F.TEXT, F.TIMESTAMP, ts.date_to_timestamp)
    builder.register(F.TEXT, F.ISO_DATE, ts.date_to_iso)
