"""Tests for format ids and the catalog."""
import re

import pytest

from format_converter.domain.catalog import (
    FORMAT_CATALOG,
    FormatDescriptor,
    describe_format,
    groups,
    list_formats,
)
from format_converter.domain.errors import ErrorCode, NotFoundError
from format_converter.domain.format_ids import FormatId


class TestFormatId:
    """Test FormatId."""

    def test_values_are_stable_wire_tokens(self):
        """Every id is a lowercase, hyphenated token."""
        pattern = re.compile(r"^[a-z0-9]+(-[a-z0-9]+)*$")
        for member in FormatId:
            assert pattern.match(member.value), member.value

    def test_from_string_normalizes_case_and_whitespace(self):
        assert FormatId.from_string("  Color-HSL ") is FormatId.COLOR_HSL
        assert FormatId.from_string(FormatId.TEXT) is FormatId.TEXT

    def test_from_string_unknown_raises_not_found(self):
        with pytest.raises(NotFoundError) as excinfo:
            FormatId.from_string("klingon")
        assert excinfo.value.code is ErrorCode.NOT_FOUND

    def test_all_ids(self):
        assert FormatId.all_ids() == list(FormatId)

    def test_enum_compares_equal_to_wire_id(self):
        assert FormatId.COLOR_HSL == "color-hsl"
        assert FormatId.DUR_SECONDS.value == "dur-seconds"


class TestCatalog:
    """Test the format catalog."""

    def test_one_descriptor_per_format_id(self):
        ids = [descriptor.id for descriptor in FORMAT_CATALOG]
        assert len(ids) == len(set(ids))
        assert set(ids) == set(FormatId)

    def test_catalog_size(self):
        assert len(list_formats()) == 223

    def test_list_formats_returns_a_copy(self):
        formats = list_formats()
        formats.clear()
        assert len(list_formats()) == len(FORMAT_CATALOG)

    def test_describe_format(self):
        descriptor = describe_format("base64")
        assert isinstance(descriptor, FormatDescriptor)
        assert descriptor.id is FormatId.BASE64
        assert descriptor.display_name == "Base64"
        assert descriptor.group == "Text"

    def test_describe_unknown_returns_none(self):
        assert describe_format("not-a-format") is None

    def test_to_dict(self):
        data = describe_format(FormatId.TEXT).to_dict()
        assert data["id"] == "text"
        assert set(data) == {"id", "display_name", "group", "example_placeholder"}

    def test_groups_are_distinct_and_ordered(self):
        labels = groups()
        assert labels[0] == "Text"
        assert len(labels) == len(set(labels))
        assert "Typography" in labels
