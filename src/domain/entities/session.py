"""User and session domain entities."""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import IntEnum


class UserRole(IntEnum):
    """User role hierarchy. Higher value = more permissions."""

    PLAYER = 1
    TRUSTED = 2
    ASSISTANT = 3
    GAMEMASTER = 4


@dataclass(frozen=True)
class User:
    """Domain entity for a user of the world."""

    id: str
    name: str
    role: UserRole = UserRole.PLAYER
    active: bool = False

    @property
    def is_gm(self) -> bool:
        return self.role >= UserRole.ASSISTANT


def elect_active_gm(users: Iterable[User]) -> User | None:
    """Pick the active game master: the connected GM with the lowest id."""
    candidates = sorted((u for u in users if u.active and u.is_gm), key=lambda u: u.id)
    return candidates[0] if candidates else None


@dataclass(frozen=True)
class SessionContext:
    """The local session: who is acting and who holds primary authority.

    Exactly one connected session, the active GM's, is the primary authority.
    Reactions with world-wide side effects run only there.
    """

    user_id: str
    active_gm_id: str | None = None

    @classmethod
    def for_user(cls, user_id: str, users: Iterable[User]) -> "SessionContext":
        active_gm = elect_active_gm(users)
        return cls(user_id=user_id, active_gm_id=active_gm.id if active_gm else None)

    @property
    def is_primary_authority(self) -> bool:
        return self.active_gm_id is not None and self.user_id == self.active_gm_id
