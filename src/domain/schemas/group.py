"""Pydantic schema for the persisted data of group actors.

Stored data may predate the current layout. ``migrate_data`` upgrades it and
runs as a ``mode="before"`` validator, so it always sees the raw source ahead
of any field coercion. Loading never mutates the caller's source.

Example source, using the legacy bare-id member list::

    {"type": {"value": "party"}, "members": ["3f3hoYFWUgDqBP4U"]}
"""

from collections.abc import Mapping
from typing import Annotated, Any

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, model_validator

from domain.schemas.currency import CurrencyTemplate


def _blank_if_none(value: Any) -> Any:
    return "" if value is None else value


def _to_step(value: float) -> float:
    # Speeds move in steps of 0.1
    return round(value, 1)


TextField = Annotated[str, BeforeValidator(_blank_if_none)]
Speed = Annotated[float, Field(ge=0, allow_inf_nan=False), AfterValidator(_to_step)]


class GroupTypeData(BaseModel):
    """Kind of group, e.g. "party", "encounter" or "crew"."""

    model_config = ConfigDict(extra="ignore")

    value: TextField = ""


class DescriptionData(BaseModel):
    """Rich text descriptions of the group."""

    model_config = ConfigDict(extra="ignore")

    full: TextField = ""
    summary: TextField = ""


class MemberData(BaseModel):
    """A stored member entry: an actor id and how many of that actor."""

    model_config = ConfigDict(extra="ignore")

    actor: str | None = None
    quantity: int = Field(1, ge=0)


class MovementData(BaseModel):
    """Base movement speeds over land, over water and through the air."""

    model_config = ConfigDict(extra="ignore")

    land: Speed = 0
    water: Speed = 0
    air: Speed = 0


class AttributesData(BaseModel):
    model_config = ConfigDict(extra="ignore")

    movement: MovementData = Field(default_factory=MovementData)


class GroupData(CurrencyTemplate):
    """Persisted ``system`` data of a group actor."""

    model_config = ConfigDict(extra="ignore")

    type: GroupTypeData = Field(default_factory=GroupTypeData)
    description: DescriptionData = Field(default_factory=DescriptionData)
    members: list[MemberData] = Field(default_factory=list)
    attributes: AttributesData = Field(default_factory=AttributesData)

    @model_validator(mode="before")
    @classmethod
    def _migrate(cls, data: Any) -> Any:
        if isinstance(data, Mapping):
            return migrate_data(dict(data))
        return data


def migrate_data(source: dict[str, Any]) -> dict[str, Any]:
    """Upgrade legacy group source data in place and return it."""
    _migrate_members(source)
    return source


def _migrate_members(source: dict[str, Any]) -> None:
    """Wrap bare member ids as ``{"actor": id}`` entries."""
    if "members" not in source:
        return
    members = source["members"]
    if not isinstance(members, list):
        return
    source["members"] = [
        member if isinstance(member, Mapping) else {"actor": member}
        for member in members
    ]
