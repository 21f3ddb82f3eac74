"""Shared behaviour of the stored entities."""

from dataclasses import dataclass, fields
from typing import Any


@dataclass
class BaseEntity:
    """Entities carry an `id` that stays None until the row is inserted."""

    @property
    def is_stored(self) -> bool:
        return getattr(self, "id", None) is not None

    def label(self) -> str:
        """Short log/display tag, e.g. ``Candidate #3 Jane Doe``."""
        ident = f"#{self.id}" if self.is_stored else "(unsaved)"
        return f"{type(self).__name__} {ident} {getattr(self, 'name', '')}".rstrip()

    def to_dict(self) -> dict[str, Any]:
        """Field values in row form: referenced entities become their ids."""
        row = {}
        for f in fields(self):
            value = getattr(self, f.name)
            if isinstance(value, BaseEntity):
                row[f"{f.name}_id"] = value.id
            else:
                row[f.name] = value
        return row
