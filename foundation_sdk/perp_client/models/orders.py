"""
Order models for the Foundation perpetual client.

Request parameters are plain frozen dataclasses. Engine payloads and open orders
are pydantic models: engine models use the snake_case wire names, client models
serialise with camelCase aliases.
"""

from typing import Optional

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict, Field

from foundation_sdk.perp_client.constants.enums import OrderSource, OrderTag, SelfTradeBehavior, Side, TimeInForce
from foundation_sdk.perp_client.models.venue import FeeTier


@dataclass(frozen=True)
class ClientPlaceOrder:
    """Order placement parameters."""

    account_id: str
    market_id: int
    side: Side
    price: str
    amount: str
    time_in_force: Optional[TimeInForce] = None
    reduce_only: Optional[bool] = None
    is_market_order: Optional[bool] = None
    self_trade_behavior: Optional[SelfTradeBehavior] = None
    nonce: Optional[str] = None
    expires_at: Optional[int] = None
    trigger_condition: Optional[int] = None
    verifying_addr: Optional[str] = None


@dataclass(frozen=True)
class ClientCancelOrder:
    """Order cancellation parameters."""

    account_id: str
    market_id: int
    order_id: str
    nonce: Optional[str] = None
    verifying_addr: Optional[str] = None


@dataclass(frozen=True)
class AddTradingKey:
    """Link of a delegated signer to an account."""

    account_id: str
    signer: str
    nonce: int


class EnginePlaceOrder(BaseModel):
    model_config = ConfigDict(frozen=True)

    account_id: str
    market_id: int
    side: Side
    price: str
    amount: str
    time_in_force: TimeInForce
    reduce_only: bool
    is_market_order: bool
    self_trade_behavior: SelfTradeBehavior
    nonce: str
    expires_at: Optional[int] = None
    trigger_condition: Optional[int] = None


class EngineCancelOrder(BaseModel):
    model_config = ConfigDict(frozen=True)

    account_id: str
    market_id: int
    order_id: str
    nonce: str


class OrderExpiration(BaseModel):
    """Decoded form of the order expiration bitfield."""

    model_config = ConfigDict(frozen=True)

    time_in_force: TimeInForce
    reduce_only: bool
    self_trade_behavior: SelfTradeBehavior
    expires_at: Optional[int] = None
    is_market_order: bool


class EngineOpenOrder(BaseModel):
    order_id: int
    account_id: str
    market_id: int
    side: Side
    create_timestamp: int
    amount: str
    price: str
    status: str
    matched_quote_amount: str
    matched_base_amount: str
    quote_fee: str
    nonce: int
    expiration: OrderExpiration
    is_triggered: bool
    signature: str
    signer: str
    has_dependency: bool
    source: OrderSource
    system_fee_tier: FeeTier
    broker_fee_tier: FeeTier
    tag: OrderTag


class ClientOpenOrder(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    order_id: int = Field(alias="orderId")
    account_id: str = Field(alias="accountId")
    market_id: int = Field(alias="marketId")
    side: Side
    create_timestamp: int = Field(alias="createTimestamp")
    amount: str
    price: str
    status: str
    matched_quote_amount: str = Field(alias="matchedQuoteAmount")
    matched_base_amount: str = Field(alias="matchedBaseAmount")
    quote_fee: str = Field(alias="quoteFee")
    nonce: int
    expiration: OrderExpiration
    is_triggered: bool = Field(alias="isTriggered")
    has_dependency: bool = Field(alias="hasDependency")
    tag: OrderTag
