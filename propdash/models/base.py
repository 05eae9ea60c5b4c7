"""Base models shared across entity kinds."""

from dataclasses import dataclass, fields
from typing import Any


class _Unset:
    """Marker for patch fields that were not supplied."""

    _instance: "_Unset | None" = None

    def __new__(cls) -> "_Unset":
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return "UNSET"

    def __bool__(self) -> bool:
        return False


UNSET: Any = _Unset()

# Fields owned by the data layer; never supplied by callers
MANAGED_FIELDS = frozenset({"id", "created_at", "updated_at"})


@dataclass(frozen=True)
class EmergencyContact:
    """Emergency contact embedded in a tenant record.

    Has no identity of its own: a patch that touches it replaces the
    whole contact.
    """

    name: str
    phone: str
    relationship: str


@dataclass(frozen=True)
class Patch:
    """Partial set of fields applied to an existing record.

    Subclasses declare every updatable field with ``UNSET`` as the default.
    Fields left unset are not touched; fields explicitly set to ``None``
    clear the stored value.
    """

    def changes(self) -> dict[str, Any]:
        """Return the fields that were supplied, by name."""
        return {
            f.name: getattr(self, f.name)
            for f in fields(self)
            if getattr(self, f.name) is not UNSET
        }

    def __bool__(self) -> bool:
        return bool(self.changes())
