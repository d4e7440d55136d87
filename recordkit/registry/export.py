"""Export codec — structured text form of the registry's id → record mapping.

JSON layout (keys are stringified ids, ascending)::

    {
      "1": {"id": 1, "name": "John Doe", "email": "john@example.com"}
    }

YAML uses the same layout with integer keys.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Iterable

import yaml

from recordkit import config
from recordkit.errors import InvalidInputError, SerializationError
from recordkit.registry.models import Record
from recordkit.utils.validator import require_in_range

FORMATS = ("json", "yaml")

_SUFFIX_FORMATS = {
    ".json": "json",
    ".yaml": "yaml",
    ".yml": "yaml",
}


def format_for_path(path: str | Path) -> str:
    """Pick the export format from the destination's suffix."""
    fmt = _SUFFIX_FORMATS.get(Path(path).suffix.lower(), config.EXPORT_FORMAT)
    if fmt not in FORMATS:
        raise SerializationError(f"Unknown export format '{fmt}'. Must be one of: {FORMATS}")
    return fmt


def encode_records(records: Iterable[Record], fmt: str = "json") -> str:
    """Encode records as a mapping keyed by id, in ascending id order."""
    ordered = sorted(records, key=lambda r: r.id)
    try:
        if fmt == "json":
            payload = {str(r.id): r.to_dict() for r in ordered}
            return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
        if fmt == "yaml":
            payload = {r.id: r.to_dict() for r in ordered}
            return yaml.safe_dump(payload, sort_keys=False, allow_unicode=True)
    except (TypeError, ValueError, yaml.YAMLError) as e:
        raise SerializationError(f"Failed to encode records as {fmt}: {e}") from e
    raise SerializationError(f"Unknown export format '{fmt}'. Must be one of: {FORMATS}")


def decode_records(text: str, fmt: str = "json") -> dict[int, Record]:
    """Parse exported text back into an id → record mapping."""
    try:
        if fmt == "json":
            data = json.loads(text)
        elif fmt == "yaml":
            data = yaml.safe_load(text)
        else:
            raise SerializationError(f"Unknown export format '{fmt}'. Must be one of: {FORMATS}")
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise SerializationError(f"Invalid {fmt}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SerializationError("Export must be a mapping of id to record")

    records: dict[int, Record] = {}
    for key, value in data.items():
        try:
            record = Record.from_dict(value)
            require_in_range(record.id, 1, sys.maxsize, "id")
            if isinstance(key, bool):
                raise InvalidInputError(f"key must be an id, got {key!r}")
            key_id = int(key)
        except (InvalidInputError, TypeError, ValueError) as e:
            raise SerializationError(f"Invalid record under key {key!r}: {e}") from e
        if key_id != record.id:
            raise SerializationError(f"Key {key!r} does not match record id {record.id}")
        records[record.id] = record
    return records
