"""Account and position models for the Foundation perpetual client."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class EnginePosition(BaseModel):
    base_amount: str
    quote_amount: str
    last_cumulative_funding: str
    frozen_in_bid_order: str
    frozen_in_ask_order: str
    unsettled_pnl: str
    is_settle_pending: Optional[bool] = None


class EngineAccount(BaseModel):
    # keyed by market id; JSON object keys arrive as strings
    positions: dict[str, EnginePosition]
    collateral: str
    is_in_liquidation_queue: bool


class ClientPosition(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    market_id: int = Field(alias="marketId")
    base_amount: str = Field(alias="baseAmount")
    quote_amount: str = Field(alias="quoteAmount")
    last_cumulative_funding: str = Field(alias="lastCumulativeFunding")
    frozen_in_bid_order: str = Field(alias="frozenInBidOrder")
    frozen_in_ask_order: str = Field(alias="frozenInAskOrder")
    unsettled_pnl: str = Field(alias="unsettledPnl")


class ClientAccount(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    positions: list[ClientPosition]
    collateral: str
    is_in_liquidation_queue: bool = Field(alias="isInLiquidationQueue")
