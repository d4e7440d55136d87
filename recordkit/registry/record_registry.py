"""In-memory record registry.

Holds records keyed by id for the lifetime of the process. Nothing is read
from or written to disk except through an explicit export.

Not thread-safe: a host that shares one registry across threads must guard
it with its own lock.
"""

from __future__ import annotations

from pathlib import Path

from recordkit.errors import ExportIOError, InvalidInputError, SerializationError
from recordkit.registry.export import decode_records, encode_records, format_for_path
from recordkit.registry.models import Record
from recordkit.utils.validator import require_non_empty


class RecordRegistry:
    """Creates, looks up, searches, and exports records."""

    def __init__(self):
        self._records: dict[int, Record] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, record_id: object) -> bool:
        return self.get(record_id) is not None

    def size(self) -> int:
        return len(self._records)

    def create(self, name: str, email: str) -> Record:
        """Create a record and return it.

        The new id is the current size plus one. Raises InvalidInputError
        if ``name`` is empty, then if ``email`` is empty; the registry is
        left unchanged on failure.
        """
        require_non_empty(name, "name")
        require_non_empty(email, "email")

        record = Record(id=self.size() + 1, name=name, email=email)
        self._records[record.id] = record
        return record

    def get(self, record_id: object) -> Record | None:
        """Get a record by id, or None if there is none."""
        if isinstance(record_id, bool) or not isinstance(record_id, int):
            return None
        return self._records.get(record_id)

    def find_by_name(self, term: str) -> list[Record]:
        """Records whose name contains ``term`` (case-sensitive), in id order."""
        return [r for r in self.list_all() if term in r.name]

    def list_all(self) -> list[Record]:
        """List all records in id order."""
        return [self._records[k] for k in sorted(self._records)]

    def export_all(self, destination: str | Path) -> None:
        """Write every record to ``destination`` as JSON or YAML.

        The format follows the file suffix. The payload is encoded before
        the file is opened, so an encoding failure leaves any existing file
        untouched.
        """
        path = Path(destination)
        text = encode_records(self._records.values(), format_for_path(path))
        try:
            with open(path, "w", encoding="utf-8") as f:
                f.write(text)
        except OSError as e:
            raise ExportIOError(f"Cannot write export to {path}: {e}") from e

    @classmethod
    def load_export(cls, source: str | Path) -> RecordRegistry:
        """Rebuild a registry from a file written by :meth:`export_all`."""
        path = Path(source)
        try:
            with open(path, encoding="utf-8") as f:
                text = f.read()
        except OSError as e:
            raise ExportIOError(f"Cannot read export from {path}: {e}") from e

        records = decode_records(text, format_for_path(path))
        if sorted(records) != list(range(1, len(records) + 1)):
            raise SerializationError(
                f"Export ids must run 1..{len(records)} without gaps, got {sorted(records)}"
            )

        registry = cls()
        for record_id in sorted(records):
            record = records[record_id]
            try:
                require_non_empty(record.name, "name")
                require_non_empty(record.email, "email")
            except InvalidInputError as e:
                raise SerializationError(f"Invalid record {record_id}: {e}") from e
            registry._records[record_id] = record
        return registry
