"""
Trading venue configuration returned by the engine.

The snapshot is immutable; refreshing it means replacing the whole object.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class FeeTier(BaseModel):
    model_config = ConfigDict(frozen=True)

    maker_fee: str
    taker_fee: str


class AddressConfig(BaseModel):
    """Contract addresses used as EIP-712 verifying contracts."""

    model_config = ConfigDict(frozen=True)

    endpoint: str
    cr_manager: str
    offchain_book: str


class VenueConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    chain_id: Optional[int] = None
    addresses: AddressConfig
    system_fee_tiers: list[FeeTier] = Field(default_factory=list)
