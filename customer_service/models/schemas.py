from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, ConfigDict


class Tier(str, Enum):
    """Nominal customer tiers. ``Customer.tier`` accepts any string."""

    BRONZE = "BRONZE"
    SILVER = "SILVER"
    GOLD = "GOLD"


class CustomerCreate(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # None means "generate one"; an empty string is kept as a caller-supplied id.
    id: str | None = None
    name: str | None = None
    email: str | None = None
    tier: str | None = None


class Customer(BaseModel):
    id: str
    name: str | None = None
    email: str | None = None
    tier: str | None = None
