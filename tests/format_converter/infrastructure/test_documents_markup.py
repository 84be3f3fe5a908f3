"""Tests for structured data documents and markup rewrites."""
import json

import pytest
import yaml

from format_converter.domain.converter import FunctionConverter
from format_converter.domain.errors import DecodeError
from format_converter.infrastructure import markup
from format_converter.infrastructure import structured_data as sd


class TestDocuments:
    """Test document loaders and dumpers."""

    def test_json_pretty_and_min(self):
        assert sd.document_converter("json-min", "json")('{"a":[1,2]}') == '{\n  "a": [\n    1,\n    2\n  ]\n}'
        assert sd.document_converter("json", "json-min")('{ "a" : [1, 2] }') == '{"a":[1,2]}'

    def test_json_to_yaml(self):
        result = sd.document_converter("json", "yaml")('{"name": "Ada", "langs": ["py", "c"]}')
        assert result == "name: Ada\nlangs:\n- py\n- c"

    def test_yaml_to_json(self):
        result = sd.document_converter("yaml", "json-min")("name: Ada\nlangs:\n  - py\n")
        assert json.loads(result) == {"name": "Ada", "langs": ["py"]}

    def test_csv_to_json(self):
        result = sd.document_converter("csv", "json")("a,b\n1,2\n3,4")
        assert json.loads(result) == [{"a": "1", "b": "2"}, {"a": "3", "b": "4"}]

    def test_json_to_csv(self):
        result = sd.document_converter("json", "csv")('[{"a": 1, "b": true}, {"a": 2, "c": null}]')
        assert result == "a,b,c\n1,true,\n2,,"

    def test_csv_quoting(self):
        result = sd.document_converter("json", "csv")('[{"note": "x, y"}]')
        assert result == 'note\n"x, y"'

    def test_csv_to_tsv(self):
        assert sd.document_converter("csv", "tsv")("a,b\n1,2") == "a\tb\n1\t2"

    def test_tabular_output_needs_records(self):
        with pytest.raises(DecodeError):
            sd.dump_csv([1, 2, 3])
        with pytest.raises(DecodeError):
            sd.dump_csv([])

    def test_wrapped_rows_are_unwrapped(self):
        assert sd.dump_csv({"rows": [{"a": "1"}]}) == "a\n1"

    def test_json_to_toml(self):
        result = sd.document_converter("json", "toml")('{"title": "x", "owner": {"name": "Ada", "age": 36}}')
        assert result == 'title = "x"\n\n[owner]\nname = "Ada"\nage = 36'

    def test_toml_round_trip(self):
        source = {"title": "x", "tags": ["a", "b"], "owner": {"name": "Ada"}, "items": [{"id": 1}, {"id": 2}]}
        assert sd.load_toml(sd.dump_toml(source)) == source

    def test_list_to_toml_is_wrapped(self):
        assert sd.load_toml(sd.dump_toml([{"a": 1}])) == {"rows": [{"a": 1}]}

    def test_toml_has_no_null(self):
        with pytest.raises(DecodeError):
            sd.dump_toml({"a": None})

    def test_xml_to_json(self):
        result = sd.document_converter("xml", "json-min")('<user id="7"><name>Ada</name><tag>a</tag><tag>b</tag></user>')
        assert json.loads(result) == {"user": {"@id": "7", "name": "Ada", "tag": ["a", "b"]}}

    def test_json_to_xml(self):
        result = sd.document_converter("json", "xml")('{"user": {"@id": "7", "name": "Ada"}}')
        assert result == '<?xml version="1.0"?>\n<user id="7">\n  <name>Ada</name>\n</user>'

    def test_xml_round_trip(self):
        value = {"user": {"@id": "7", "name": "Ada", "tag": ["a", "b"]}}
        assert sd.load_xml(sd.dump_xml(value)) == value

    def test_querystring(self):
        assert json.loads(sd.document_converter("querystring", "json")("?a=1&b=two&c=")) == {
            "a": "1",
            "b": "two",
            "c": "",
        }
        assert sd.document_converter("json", "querystring")('{"q": "a b", "n": 2}') == "q=a+b&n=2"

    def test_querystring_needs_object(self):
        with pytest.raises(DecodeError):
            sd.dump_querystring([1])

    def test_yaml_output_is_loadable(self):
        value = {"text": "multi\nline", "unicode": "héllo"}
        assert yaml.safe_load(sd.dump_yaml(value)) == value

    def test_loaders_and_dumpers_cover_same_formats(self):
        assert set(sd.LOADERS) == set(sd.DUMPERS)


class TestYamlKeys:
    """YAML keys that are not strings are written as strings elsewhere."""

    def test_integer_key_to_toml(self):
        assert sd.document_converter("yaml", "toml")("1: a") == '1 = "a"'

    def test_mixed_keys_to_toml(self):
        result = sd.document_converter("yaml", "toml")("1.5: a\ntrue: b\nnull: c\nname: d")
        assert sd.load_toml(result) == {"1.5": "a", "true": "b", "null": "c", "name": "d"}

    def test_date_key_to_json(self):
        result = sd.document_converter("yaml", "json-min")("2020-01-01: launch")
        assert json.loads(result) == {"2020-01-01": "launch"}

    def test_integer_key_is_not_an_xml_name(self):
        with pytest.raises(DecodeError):
            sd.document_converter("yaml", "xml")("user:\n  7: seven")

    def test_date_value_in_csv_cell(self):
        assert sd.document_converter("yaml", "csv")("- when: [2020-01-01]") == 'when\n"[""2020-01-01""]"'


class TestOversizedDocuments:
    """Parser limits surface as decode errors once wrapped."""

    def test_deeply_nested_json(self):
        converter = FunctionConverter(sd.document_converter("json", "yaml"))
        with pytest.raises(DecodeError):
            converter.convert("[" * 100000)

    def test_deeply_nested_yaml(self):
        converter = FunctionConverter(sd.document_converter("yaml", "json"))
        with pytest.raises(DecodeError):
            converter.convert("[" * 5000 + "]" * 5000)

    def test_csv_field_over_limit(self):
        converter = FunctionConverter(sd.document_converter("csv", "json"))
        with pytest.raises(DecodeError):
            converter.convert("a\n" + "x" * 200000)


class TestXmlNames:
    """Keys must be valid XML names before they become tags or attributes."""

    @pytest.mark.parametrize("value", [{"a b": 1}, {"1st": 1}, {"": 1}, {"user": {"@bad id": "7"}}, {"x": {"<y": 1}}])
    def test_invalid_names_rejected(self, value):
        with pytest.raises(DecodeError):
            sd.dump_xml(value)

    def test_json_key_with_space(self):
        with pytest.raises(DecodeError):
            sd.document_converter("json", "xml")('{"a b": 1}')

    def test_valid_names_kept(self):
        result = sd.dump_xml({"_item-1.x": {"@data-id": "7", "é": "ok"}})
        assert sd.load_xml(result) == {"_item-1.x": {"@data-id": "7", "é": "ok"}}


class TestMarkup:
    """Test Markdown and HTML rewrites."""

    def test_markdown_to_html(self):
        assert markup.markdown_to_html("# Title\n**bold** and *it*") == (
            "<h1>Title</h1>\n<strong>bold</strong> and <em>it</em>"
        )

    def test_markdown_links_and_code(self):
        assert markup.markdown_to_html("see [docs](http://x) and `code`") == (
            'see <a href="http://x">docs</a> and <code>code</code>'
        )

    def test_markdown_to_plain(self):
        assert markup.markdown_to_plain("## Hi\n> quoted\n- item [x](y)") == "Hi\nquoted\nitem x"

    def test_html_to_markdown(self):
        assert markup.html_to_markdown("<h2>Sub</h2>") == "## Sub"
        assert markup.html_to_markdown('<a href="http://x">link</a> &amp; <b>b</b>') == "[link](http://x) & **b**"

    def test_html_to_plain_drops_scripts(self):
        assert markup.html_to_plain("<p>Hi <b>there</b> &amp; you</p><script>x()</script>") == "Hi there & you"

    def test_malformed_marked_section(self):
        try:
            result = markup.html_to_plain("<![x[ text")
        except DecodeError:
            return
        assert isinstance(result, str)

    def test_plain_to_html(self):
        assert markup.plain_to_html("a < b\n\nline1\nline2") == "<p>a &lt; b</p>\n<p>line1<br>line2</p>"
