"""
Foundation Perpetual Client - Main entry point for the Foundation perpetual engine.

This module provides the client-facing API: it maps client-shaped parameters to
engine payloads, has them signed and submitted by ``FoundationPerpEngine``, and
maps engine responses back to client-shaped models.
"""

from typing import Optional

import logging

from foundation_sdk.perp_client.auth.signatures import TypedDataSigner
from foundation_sdk.perp_client.config import ClientConfig
from foundation_sdk.perp_client.engine import FoundationPerpEngine
from foundation_sdk.perp_client.models.account import ClientAccount
from foundation_sdk.perp_client.models.markets import (
    ClientMarketConfig,
    ClientMarketPrice,
    ClientMarketState,
    ClientOrderbook,
)
from foundation_sdk.perp_client.models.orders import (
    AddTradingKey,
    ClientCancelOrder,
    ClientOpenOrder,
    ClientPlaceOrder,
)
from foundation_sdk.perp_client.transport import JsonRpcTransport
from foundation_sdk.perp_client.utils.mappers import (
    build_client_account,
    build_client_market_config,
    build_client_market_price,
    build_client_market_state,
    build_client_open_order,
    build_client_orderbook,
    build_engine_cancel_order,
    build_engine_place_order,
)

DEFAULT_ORDERBOOK_DEPTH = 1000


class FoundationPerpClient:
    """
    Client for interacting with the Foundation perpetual engine.

    Every method is a single round trip to the engine (write methods sign first).
    Nothing is batched, queued or retried.
    """

    def __init__(
        self,
        rpc: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[JsonRpcTransport] = None,
    ):
        """
        Initialize the client.

        Args:
            rpc: Engine RPC URL (http(s) or ws(s))
            config: Optional client configuration (loaded from the environment if not provided)
            transport: Optional transport overriding the one selected from the URL
        """
        self._engine = FoundationPerpEngine(rpc=rpc, config=config, transport=transport)
        self.logger = logging.getLogger("foundation.perp_client.client")

    @property
    def engine(self) -> FoundationPerpEngine:
        """Get the underlying engine client."""
        return self._engine

    async def get_user_nonce(self, address: str) -> int:
        return await self._engine.get_user_nonce(address)

    async def add_trading_key(
        self,
        signer: TypedDataSigner,
        account_id: str,
        verifying_addr: Optional[str] = None,
    ) -> None:
        """
        Link the signer's address as a trading key of an account.

        The signer's current nonce is fetched from the engine and signed with the
        link request.

        Args:
            signer: Wallet to link
            account_id: Account the key trades for
            verifying_addr: Verifying contract override (defaults to the endpoint contract)
        """
        nonce = await self.get_user_nonce(signer.address)
        params = AddTradingKey(account_id=account_id, signer=signer.address, nonce=nonce)

        signature = await self._engine.sign_add_trading_key(signer, params, verifying_addr)
        await self._engine.add_trading_key(params, signature)
        self.logger.info(f"Linked trading key {signer.address} to account {account_id}")

    async def get_trading_key(self, account_id: str) -> Optional[str]:
        return await self._engine.get_trading_key(account_id)

    async def place_order(self, signer: TypedDataSigner, params: ClientPlaceOrder) -> int:
        """
        Sign and place an order.

        Args:
            signer: Signer of the order
            params: Order parameters; a nonce is generated when none is given

        Returns:
            ID assigned to the order
        """
        payload = build_engine_place_order(params)
        signature = await self._engine.sign_place_order(signer, payload, params.verifying_addr)

        order_id = await self._engine.place_order(payload, signature)
        self.logger.debug(f"Placed order {order_id} on market {payload.market_id}")
        return order_id

    async def cancel_order(self, signer: TypedDataSigner, params: ClientCancelOrder) -> int:
        """
        Sign and submit an order cancellation.

        Args:
            signer: Signer of the cancellation
            params: Cancellation parameters; a nonce is generated when none is given

        Returns:
            ID of the cancelled order
        """
        payload = build_engine_cancel_order(params)
        signature = await self._engine.sign_cancel_order(signer, payload, params.verifying_addr)

        return await self._engine.cancel_order(payload, signature)

    async def get_open_order_by_id(self, market_id: int, order_id: int) -> Optional[ClientOpenOrder]:
        order = await self._engine.get_open_order_by_id(market_id, order_id)
        if order is None:
            return None

        return build_client_open_order(order)

    async def get_open_orders_by_account(self, market_id: int, account_id: str) -> list[ClientOpenOrder]:
        orders = await self._engine.get_open_orders_by_account(market_id, account_id)
        return [build_client_open_order(order) for order in orders]

    async def get_account(self, account_id: str) -> ClientAccount:
        """Get collateral, liquidation status and positions of an account."""
        account = await self._engine.get_account(account_id)
        return build_client_account(account)

    async def get_market_configs(self) -> list[ClientMarketConfig]:
        markets = await self._engine.get_market_configs()
        return [build_client_market_config(market) for market in markets]

    async def get_market_states(self) -> list[ClientMarketState]:
        markets = await self._engine.get_market_states()
        return [build_client_market_state(market) for market in markets]

    async def get_market_price(self, market_id: int) -> ClientMarketPrice:
        price = await self._engine.get_market_price(market_id)
        return build_client_market_price(price)

    async def get_orderbook(self, market_id: int, take: int = DEFAULT_ORDERBOOK_DEPTH) -> Optional[ClientOrderbook]:
        """
        Get the order book of a market.

        Args:
            market_id: Market ID
            take: Maximum number of levels per side

        Returns:
            The order book, or None if the engine has none for the market
        """
        orderbook = await self._engine.get_orderbook(market_id, take)
        if orderbook is None:
            return None

        return build_client_orderbook(orderbook)

    async def close(self) -> None:
        """Close the underlying transport."""
        await self._engine.close()

    async def __aenter__(self):
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        """Async context manager exit - automatically closes the transport."""
        await self.close()
