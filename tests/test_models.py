"""Tests for the record model and the export codec."""

import dataclasses

import pytest

from recordkit import config
from recordkit.errors import InvalidInputError, SerializationError
from recordkit.registry.export import decode_records, encode_records, format_for_path
from recordkit.registry.models import Record


def test_record_is_immutable():
    record = Record(id=1, name="John Doe", email="john@example.com")
    with pytest.raises(dataclasses.FrozenInstanceError):
        record.name = "Someone Else"


def test_record_dict_round_trip():
    record = Record(id=7, name="Jane", email="jane@example.com")
    assert record.to_dict() == {"id": 7, "name": "Jane", "email": "jane@example.com"}
    assert Record.from_dict(record.to_dict()) == record


def test_record_from_dict_missing_fields():
    with pytest.raises(InvalidInputError, match="email"):
        Record.from_dict({"id": 1, "name": "Jane"})
    with pytest.raises(InvalidInputError):
        Record.from_dict(["not", "a", "mapping"])


def test_format_for_path():
    assert format_for_path("out.json") == "json"
    assert format_for_path("out.yaml") == "yaml"
    assert format_for_path("OUT.YML") == "yaml"


def test_encode_orders_by_id():
    records = [
        Record(id=2, name="B", email="b@x"),
        Record(id=1, name="A", email="a@x"),
    ]
    text = encode_records(records, "json")
    assert text.index('"1"') < text.index('"2"')


def test_encode_keeps_non_ascii_readable():
    text = encode_records([Record(id=1, name="Zoë", email="zoe@x")], "json")
    assert "Zoë" in text


def test_encode_unknown_format():
    with pytest.raises(SerializationError):
        encode_records([], "toml")


def test_decode_invalid_json():
    with pytest.raises(SerializationError):
        decode_records("{not json", "json")


def test_decode_rejects_non_mapping():
    with pytest.raises(SerializationError):
        decode_records("- 1\n- 2\n", "yaml")


def test_decode_rejects_key_mismatch():
    text = '{"1": {"id": 2, "name": "A", "email": "a@x"}}'
    with pytest.raises(SerializationError, match="does not match"):
        decode_records(text, "json")


def test_decode_empty_yaml():
    assert decode_records("", "yaml") == {}


def test_decode_rejects_bool_id():
    text = '{"1": {"id": true, "name": "A", "email": "a@x"}}'
    with pytest.raises(SerializationError, match="id must be an integer"):
        decode_records(text, "json")


def test_decode_rejects_float_id():
    with pytest.raises(SerializationError):
        decode_records('{"1": {"id": 1.0, "name": "A", "email": "a@x"}}', "json")
    with pytest.raises(SerializationError):
        decode_records("1:\n  id: 1.0\n  name: A\n  email: a@x\n", "yaml")


def test_decode_rejects_non_positive_id():
    with pytest.raises(SerializationError, match="between"):
        decode_records('{"0": {"id": 0, "name": "A", "email": "a@x"}}', "json")


def test_decode_rejects_bool_key():
    with pytest.raises(SerializationError):
        decode_records("true:\n  id: 1\n  name: A\n  email: a@x\n", "yaml")


def test_unknown_suffix_uses_configured_format(monkeypatch):
    monkeypatch.setattr(config, "EXPORT_FORMAT", "yaml")
    assert format_for_path("out.txt") == "yaml"
    assert format_for_path("out.json") == "json"


def test_invalid_configured_format(monkeypatch):
    monkeypatch.setattr(config, "EXPORT_FORMAT", "toml")
    with pytest.raises(SerializationError, match="Unknown export format"):
        format_for_path("out.txt")
