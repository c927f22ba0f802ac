"""Stock level snapshot model."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class StockLevels(BaseModel):
    """Point-in-time copy of the four ingredient quantities."""

    kibble: int = Field(ge=0)
    water: int = Field(ge=0)
    wet_food: int = Field(ge=0)
    treats: int = Field(ge=0)

    model_config = ConfigDict(frozen=True)
