"""Market models for the Foundation perpetual client."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

# (price, amount, cumulative amount)
OrderbookItem = tuple[str, str, str]


class EngineMarketConfig(BaseModel):
    id: int
    ticker: str
    min_volume: str
    tick_size: str
    step_size: str
    initial_margin: str
    maintenance_margin: str
    is_open: bool
    next_open: Optional[int] = None
    next_close: Optional[int] = None
    insurance_id: Optional[str] = None
    price_cap: str
    price_floor: str
    available_from: int
    unavailable_after: Optional[int] = None
    pyth_id: Optional[str] = None


class ClientMarketConfig(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    ticker: str
    min_volume: str = Field(alias="minVolume")
    tick_size: str = Field(alias="tickSize")
    step_size: str = Field(alias="stepSize")
    initial_margin: str = Field(alias="initialMargin")
    maintenance_margin: str = Field(alias="maintenanceMargin")
    is_open: bool = Field(alias="isOpen")
    next_open: Optional[int] = Field(default=None, alias="nextOpen")
    next_close: Optional[int] = Field(default=None, alias="nextClose")
    insurance_id: Optional[str] = Field(default=None, alias="insuranceId")
    price_cap: str = Field(alias="priceCap")
    price_floor: str = Field(alias="priceFloor")
    available_from: int = Field(alias="availableFrom")
    unavailable_after: Optional[int] = Field(default=None, alias="unavailableAfter")

    def is_tradable(self, now_ms: int) -> bool:
        """Whether the market accepts orders at ``now_ms`` (epoch milliseconds)."""
        if not self.is_open or now_ms < self.available_from:
            return False
        # 0 means no cutoff
        return not self.unavailable_after or now_ms < self.unavailable_after


class EngineMarketState(BaseModel):
    id: int
    open_interest: str
    cumulative_funding: str
    available_settle: str
    next_funding_rate: str
    mark_price: Optional[str] = None


class ClientMarketState(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: int
    open_interest: str = Field(alias="openInterest")
    cumulative_funding: str = Field(alias="cumulativeFunding")
    available_settle: str = Field(alias="availableSettle")
    next_funding_rate: str = Field(alias="nextFundingRate")


class EngineOrderbook(BaseModel):
    market_id: int
    asks: list[OrderbookItem]
    bids: list[OrderbookItem]


class ClientOrderbook(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    market_id: int = Field(alias="marketId")
    asks: list[OrderbookItem]
    bids: list[OrderbookItem]


class EngineMarketPrice(BaseModel):
    index_price: str
    mark_price: str
    last_price: Optional[str] = None
    index_price_time: Optional[int] = None


class ClientMarketPrice(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    index_price: str = Field(alias="indexPrice")
    mark_price: str = Field(alias="markPrice")
    last_price: Optional[str] = Field(default=None, alias="lastPrice")
