"""Currency fields shared by actor data schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CurrencyData(BaseModel):
    """Coins carried, by denomination."""

    model_config = ConfigDict(extra="ignore")

    pp: int = Field(0, ge=0)
    gp: int = Field(0, ge=0)
    ep: int = Field(0, ge=0)
    sp: int = Field(0, ge=0)
    cp: int = Field(0, ge=0)


class CurrencyTemplate(BaseModel):
    """Mixin adding a ``currency`` field to an actor data schema."""

    currency: CurrencyData = Field(default_factory=CurrencyData)
