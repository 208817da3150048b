"""
Conversion between client-shaped and engine-shaped objects.

Nothing here recomputes values: fields are renamed, defaults are applied to
outbound payloads and account positions are flattened.
"""

from foundation_sdk.perp_client.constants.enums import SelfTradeBehavior, Side, TimeInForce
from foundation_sdk.perp_client.models.account import ClientAccount, ClientPosition, EngineAccount
from foundation_sdk.perp_client.models.markets import (
    ClientMarketConfig,
    ClientMarketPrice,
    ClientMarketState,
    ClientOrderbook,
    EngineMarketConfig,
    EngineMarketPrice,
    EngineMarketState,
    EngineOrderbook,
)
from foundation_sdk.perp_client.models.orders import (
    ClientCancelOrder,
    ClientOpenOrder,
    ClientPlaceOrder,
    EngineCancelOrder,
    EngineOpenOrder,
    EnginePlaceOrder,
)
from foundation_sdk.perp_client.utils.encoding import generate_order_nonce


def build_engine_place_order(params: ClientPlaceOrder) -> EnginePlaceOrder:
    return EnginePlaceOrder(
        account_id=params.account_id,
        market_id=params.market_id,
        side=Side(params.side),
        price=params.price,
        amount=params.amount,
        time_in_force=params.time_in_force or TimeInForce.DEFAULT,
        reduce_only=params.reduce_only or False,
        is_market_order=params.is_market_order or False,
        self_trade_behavior=params.self_trade_behavior or SelfTradeBehavior.CANCEL_PROVIDE,
        nonce=params.nonce or generate_order_nonce(),
        expires_at=params.expires_at,
        trigger_condition=params.trigger_condition,
    )


def build_engine_cancel_order(params: ClientCancelOrder) -> EngineCancelOrder:
    return EngineCancelOrder(
        account_id=params.account_id,
        market_id=params.market_id,
        order_id=params.order_id,
        nonce=params.nonce or generate_order_nonce(),
    )


def build_client_open_order(order: EngineOpenOrder) -> ClientOpenOrder:
    return ClientOpenOrder(
        order_id=order.order_id,
        account_id=order.account_id,
        market_id=order.market_id,
        side=order.side,
        create_timestamp=order.create_timestamp,
        amount=order.amount,
        price=order.price,
        status=order.status,
        matched_quote_amount=order.matched_quote_amount,
        matched_base_amount=order.matched_base_amount,
        quote_fee=order.quote_fee,
        nonce=order.nonce,
        expiration=order.expiration,
        is_triggered=order.is_triggered,
        has_dependency=order.has_dependency,
        tag=order.tag,
    )


def build_client_market_config(market: EngineMarketConfig) -> ClientMarketConfig:
    return ClientMarketConfig(
        id=market.id,
        ticker=market.ticker,
        min_volume=market.min_volume,
        tick_size=market.tick_size,
        step_size=market.step_size,
        initial_margin=market.initial_margin,
        maintenance_margin=market.maintenance_margin,
        is_open=market.is_open,
        next_open=market.next_open,
        next_close=market.next_close,
        insurance_id=market.insurance_id,
        price_cap=market.price_cap,
        price_floor=market.price_floor,
        available_from=market.available_from,
        unavailable_after=market.unavailable_after,
    )


def build_client_market_state(market: EngineMarketState) -> ClientMarketState:
    return ClientMarketState(
        id=market.id,
        open_interest=market.open_interest,
        cumulative_funding=market.cumulative_funding,
        available_settle=market.available_settle,
        next_funding_rate=market.next_funding_rate,
    )


def build_client_orderbook(orderbook: EngineOrderbook) -> ClientOrderbook:
    return ClientOrderbook(market_id=orderbook.market_id, asks=orderbook.asks, bids=orderbook.bids)


def build_client_market_price(price: EngineMarketPrice) -> ClientMarketPrice:
    return ClientMarketPrice(
        index_price=price.index_price,
        mark_price=price.mark_price,
        last_price=price.last_price,
    )


def build_client_account(account: EngineAccount) -> ClientAccount:
    positions = [
        ClientPosition(
            market_id=int(market_id),
            base_amount=position.base_amount,
            quote_amount=position.quote_amount,
            last_cumulative_funding=position.last_cumulative_funding,
            frozen_in_bid_order=position.frozen_in_bid_order,
            frozen_in_ask_order=position.frozen_in_ask_order,
            unsettled_pnl=position.unsettled_pnl,
        )
        for market_id, position in account.positions.items()
    ]

    return ClientAccount(
        positions=positions,
        collateral=account.collateral,
        is_in_liquidation_queue=account.is_in_liquidation_queue,
    )
