"""World setting domain entities."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class PrimaryParty:
    """Pointer to the world's primary party group, if any.

    Points to at most one group and is cleared when that group's type
    changes away from a party.
    """

    actor_id: str | None = None

    @classmethod
    def from_value(cls, value: Any) -> "PrimaryParty":
        if isinstance(value, dict):
            return cls(actor_id=value.get("actor"))
        return cls()

    def to_value(self) -> dict[str, Any]:
        return {"actor": self.actor_id}
