"""Registry data models."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from recordkit.errors import InvalidInputError


@dataclass(frozen=True)
class Record:
    """A uniquely identified entity with a name and an email address.

    Records are immutable once created; the registry hands out the stored
    instance directly.
    """

    id: int
    name: str
    email: str

    def to_dict(self) -> dict[str, Any]:
        return {"id": self.id, "name": self.name, "email": self.email}

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> Record:
        if not isinstance(data, dict):
            raise InvalidInputError(f"record must be a mapping, got {type(data).__name__}")
        missing = [k for k in ("id", "name", "email") if k not in data]
        if missing:
            raise InvalidInputError(f"record missing required field(s): {', '.join(missing)}")
        return cls(id=data["id"], name=data["name"], email=data["email"])
