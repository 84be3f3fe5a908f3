"""Structured data documents: JSON, YAML, TOML, CSV, TSV, XML and query strings.

Every document format has a loader (text -> Python value) and a dumper
(Python value -> text). A conversion between two document formats is the
target's dumper applied to the source's loaded value.
"""
import csv
import io
import json
import re
import tomllib
import xml.etree.ElementTree as ET
from typing import Any, Callable, Dict, List
from urllib.parse import parse_qsl, urlencode

import yaml

from ..domain.errors import DecodeError

TABULAR_WRAPPER_KEY = "rows"

# Letter or underscore first; no colons, so no namespace prefixes.
_XML_NAME = re.compile(r"[^\W\d][\w.\-]*")


def _scalar_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (dict, list)):
        return json.dumps(value, ensure_ascii=False, separators=(",", ":"), default=str)
    return str(value)


def as_records(value: Any) -> List[Dict[str, Any]]:
    """Coerce a loaded document into a list of flat records for tabular output."""
    if isinstance(value, dict):
        nested = list(value.values())
        if len(nested) == 1 and isinstance(nested[0], list):
            value = nested[0]
        else:
            return [value]
    if not isinstance(value, list) or not value:
        raise DecodeError("Expected a non-empty array of objects")
    if not all(isinstance(row, dict) for row in value):
        raise DecodeError("Every row must be an object")
    return value


# -------------------- JSON --------------------

def load_json(text: str) -> Any:
    return json.loads(text)


def dump_json(value: Any) -> str:
    return json.dumps(value, indent=2, ensure_ascii=False, default=str)


def dump_json_min(value: Any) -> str:
    return json.dumps(value, separators=(",", ":"), ensure_ascii=False, default=str)


# -------------------- YAML --------------------

def _string_keys(value: Any) -> Any:
    """YAML allows any scalar as a key; every other format wants strings."""
    if isinstance(value, dict):
        return {_key_text(key): _string_keys(item) for key, item in value.items()}
    if isinstance(value, list):
        return [_string_keys(item) for item in value]
    return value


def _key_text(key: Any) -> str:
    if isinstance(key, str):
        return key
    if isinstance(key, bool):
        return "true" if key else "false"
    if key is None:
        return "null"
    return str(key)


def load_yaml(text: str) -> Any:
    return _string_keys(yaml.safe_load(text))


def dump_yaml(value: Any) -> str:
    return yaml.safe_dump(
        value,
        sort_keys=False,
        allow_unicode=True,
        default_flow_style=False,
    ).rstrip("\n")


# -------------------- TOML --------------------

def load_toml(text: str) -> Any:
    return tomllib.loads(text)


def _toml_key(key: Any) -> str:
    key = _key_text(key)
    if key and all(char.isalnum() or char in "-_" for char in key):
        return key
    return json.dumps(key, ensure_ascii=False)


def _toml_value(value: Any) -> str:
    if value is None:
        raise DecodeError("TOML has no null value")
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return repr(value)
    if isinstance(value, list):
        return "[" + ", ".join(_toml_value(item) for item in value) + "]"
    if isinstance(value, dict):
        inner = ", ".join(f"{_toml_key(k)} = {_toml_value(v)}" for k, v in value.items())
        return "{ " + inner + " }" if inner else "{}"
    return json.dumps(str(value), ensure_ascii=False)


def _is_table_array(value: Any) -> bool:
    return isinstance(value, list) and bool(value) and all(isinstance(item, dict) for item in value)


def _emit_toml_table(table: Dict[str, Any], path: List[str], lines: List[str]) -> None:
    # Plain keys must precede sub-tables.
    for key, value in table.items():
        if not isinstance(value, dict) and not _is_table_array(value):
            lines.append(f"{_toml_key(key)} = {_toml_value(value)}")
    for key, value in table.items():
        child = path + [_toml_key(key)]
        if isinstance(value, dict):
            lines.append("")
            lines.append(f"[{'.'.join(child)}]")
            _emit_toml_table(value, child, lines)
        elif _is_table_array(value):
            for item in value:
                lines.append("")
                lines.append(f"[[{'.'.join(child)}]]")
                _emit_toml_table(item, child, lines)


def dump_toml(value: Any) -> str:
    if isinstance(value, list):
        value = {TABULAR_WRAPPER_KEY: value}
    if not isinstance(value, dict):
        raise DecodeError("TOML documents must be tables")
    lines: List[str] = []
    _emit_toml_table(value, [], lines)
    return "\n".join(lines).strip()


# -------------------- CSV / TSV --------------------

def _load_delimited(text: str, delimiter: str) -> List[Dict[str, str]]:
    reader = csv.DictReader(io.StringIO(text.strip()), delimiter=delimiter, restval="")
    if not reader.fieldnames:
        raise DecodeError("Missing header row")
    # Surplus cells land under the None key; drop them.
    return [{key: value for key, value in row.items() if key is not None} for row in reader]


def _dump_delimited(value: Any, delimiter: str) -> str:
    records = as_records(value)
    fieldnames: List[str] = []
    for record in records:
        for key in record:
            if key not in fieldnames:
                fieldnames.append(key)
    buffer = io.StringIO()
    writer = csv.DictWriter(buffer, fieldnames=fieldnames, delimiter=delimiter, lineterminator="\n")
    writer.writeheader()
    for record in records:
        writer.writerow({key: _scalar_text(record.get(key)) for key in fieldnames})
    return buffer.getvalue().rstrip("\n")


def load_csv(text: str) -> List[Dict[str, str]]:
    return _load_delimited(text, ",")


def dump_csv(value: Any) -> str:
    return _dump_delimited(value, ",")


def load_tsv(text: str) -> List[Dict[str, str]]:
    return _load_delimited(text, "\t")


def dump_tsv(value: Any) -> str:
    return _dump_delimited(value, "\t")


# -------------------- XML --------------------

def _element_to_value(element: ET.Element) -> Any:
    result: Dict[str, Any] = {f"@{name}": value for name, value in element.attrib.items()}
    for child in element:
        child_value = _element_to_value(child)
        if child.tag in result:
            existing = result[child.tag]
            if not isinstance(existing, list):
                result[child.tag] = [existing]
            result[child.tag].append(child_value)
        else:
            result[child.tag] = child_value
    text = (element.text or "").strip()
    if text:
        if not result:
            return text
        result["#text"] = text
    return result


def load_xml(text: str) -> Dict[str, Any]:
    """Parse XML. Attributes become ``@name`` keys and mixed text ``#text``."""
    root = ET.fromstring(text.strip())
    return {root.tag: _element_to_value(root)}


def _xml_name(name: str) -> str:
    if not _XML_NAME.fullmatch(name):
        raise DecodeError(f"Not a valid XML name: {name!r}")
    return name


def _value_to_element(tag: str, value: Any) -> List[ET.Element]:
    if isinstance(value, list):
        elements = []
        for item in value:
            elements.extend(_value_to_element(tag, item))
        return elements
    element = ET.Element(_xml_name(tag))
    if isinstance(value, dict):
        for key, child in value.items():
            if key.startswith("@"):
                element.set(_xml_name(key[1:]), _scalar_text(child))
            elif key == "#text":
                element.text = _scalar_text(child)
            else:
                element.extend(_value_to_element(key, child))
    elif value is not None:
        element.text = _scalar_text(value)
    return [element]


def dump_xml(value: Any) -> str:
    if isinstance(value, dict) and len(value) == 1 and not isinstance(next(iter(value.values())), list):
        tag, body = next(iter(value.items()))
    elif isinstance(value, list):
        tag, body = "data", {"row": value}
    else:
        tag, body = "root", value
    (root,) = _value_to_element(tag, body)
    ET.indent(root)
    return '<?xml version="1.0"?>\n' + ET.tostring(root, encoding="unicode")


# -------------------- Query strings --------------------

def load_querystring(text: str) -> Dict[str, str]:
    return dict(parse_qsl(text.strip().lstrip("?"), keep_blank_values=True))


def dump_querystring(value: Any) -> str:
    if not isinstance(value, dict):
        raise DecodeError("Query strings need a flat object")
    return urlencode([(key, _scalar_text(item)) for key, item in value.items()])


LOADERS: Dict[str, Callable[[str], Any]] = {
    "json": load_json,
    "json-min": load_json,
    "yaml": load_yaml,
    "toml": load_toml,
    "csv": load_csv,
    "tsv": load_tsv,
    "xml": load_xml,
    "querystring": load_querystring,
}

DUMPERS: Dict[str, Callable[[Any], str]] = {
    "json": dump_json,
    "json-min": dump_json_min,
    "yaml": dump_yaml,
    "toml": dump_toml,
    "csv": dump_csv,
    "tsv": dump_tsv,
    "xml": dump_xml,
    "querystring": dump_querystring,
}


def document_converter(source: str, target: str) -> Callable[[str], str]:
    """Build a text -> text function from one document format to another."""
    load = LOADERS[source]
    dump = DUMPERS[target]

    def convert(text: str) -> str:
        return dump(load(text))

    convert.__name__ = f"{source}_to_{target}".replace("-", "_")
    return convert
