"""
Foundation perpetual engine client.

One JSON-RPC call per engine operation, plus EIP-712 signing of the order,
cancel and trading-key payloads. Arguments and results use the engine's wire
shapes; see ``client.py`` for the client-shaped facade.
"""

from typing import Any, Optional

import dataclasses
import logging

from foundation_sdk.perp_client.auth.signatures import (
    DEFAULT_CHAIN_ID,
    TypedData,
    TypedDataSigner,
    build_cancel_typed_data,
    build_link_signer_typed_data,
    build_order_typed_data,
)
from foundation_sdk.perp_client.config import ClientConfig, get_config
from foundation_sdk.perp_client.models.account import EngineAccount
from foundation_sdk.perp_client.models.markets import (
    EngineMarketConfig,
    EngineMarketPrice,
    EngineMarketState,
    EngineOrderbook,
)
from foundation_sdk.perp_client.models.orders import (
    AddTradingKey,
    EngineCancelOrder,
    EngineOpenOrder,
    EnginePlaceOrder,
)
from foundation_sdk.perp_client.models.venue import VenueConfig
from foundation_sdk.perp_client.transport import JsonRpcTransport, create_transport


class FoundationPerpEngine:
    """
    Low-level client for the Foundation perpetual engine.

    The venue configuration (chain id and verifying contract addresses) is
    fetched on first use and kept as an immutable snapshot. It is only replaced
    through ``refresh_config`` or ``set_config``.
    """

    def __init__(
        self,
        rpc: Optional[str] = None,
        config: Optional[ClientConfig] = None,
        transport: Optional[JsonRpcTransport] = None,
    ):
        """
        Initialize the engine client.

        Args:
            rpc: Engine RPC URL; a ``ws`` scheme selects the WebSocket transport
            config: Optional client configuration (loaded from the environment if not provided)
            transport: Optional transport overriding the one selected from the URL

        If ``rpc`` is given together with ``config`` it overrides ``config.rpc_url``.
        """
        if config is None:
            config = ClientConfig(rpc_url=rpc) if rpc else get_config()
        elif rpc:
            config = dataclasses.replace(config, rpc_url=rpc)

        self._config = config
        self._transport = transport or create_transport(config.rpc_url, config.request_timeout)
        self._venue_config: Optional[VenueConfig] = None

        self.logger = logging.getLogger("foundation.perp_client.engine")

    @property
    def client_config(self) -> ClientConfig:
        """Get the client configuration."""
        return self._config

    @property
    def transport(self) -> JsonRpcTransport:
        return self._transport

    @property
    def config(self) -> Optional[VenueConfig]:
        """Get the cached venue configuration, or None if it was never fetched."""
        return self._venue_config

    async def _request(self, method: str, params: list[Any]) -> Any:
        return await self._transport.request(method, params)

    async def get_user_nonce(self, address: str) -> int:
        """
        Get the engine nonce of a wallet address.

        Args:
            address: Wallet address

        Returns:
            Current nonce of the address
        """
        return int(await self._request("core_get_user_nonce", [address]))

    async def add_trading_key(self, params: AddTradingKey, signature: str) -> None:
        """
        Link a trading key to an account.

        Args:
            params: Account, signer address and nonce that were signed
            signature: ``LinkSigner`` signature
        """
        await self._request(
            "ob_add_trading_key",
            [
                {"account_id": params.account_id, "signer": params.signer},
                params.nonce,
                signature,
            ],
        )

    async def get_trading_key(self, account_id: str) -> Optional[str]:
        """
        Get the trading key linked to an account.

        Returns:
            Signer address, or None if no key is linked
        """
        result: Optional[str] = await self._request("ob_get_trading_key", [account_id])
        return result

    async def place_order(self, params: EnginePlaceOrder, signature: str) -> int:
        """
        Submit a signed order.

        Args:
            params: Engine-shaped order
            signature: ``Order`` signature

        Returns:
            ID assigned to the order
        """
        payload = params.model_dump(mode="json", exclude_none=True)
        return int(await self._request("ob_place_limit", [payload, signature]))

    async def cancel_order(self, params: EngineCancelOrder, signature: str) -> int:
        """
        Submit a signed cancellation.

        Args:
            params: Engine-shaped cancellation
            signature: ``Cancel`` signature

        Returns:
            ID of the cancelled order
        """
        return int(await self._request("ob_cancel", [params.model_dump(mode="json"), signature]))

    async def get_open_order_by_id(self, market_id: int, order_id: int) -> Optional[EngineOpenOrder]:
        """
        Get an open order.

        Returns:
            The order, or None if the engine does not know it
        """
        result = await self._request("ob_query_order", [market_id, order_id])
        if result is None:
            return None
        return EngineOpenOrder.model_validate(result)

    async def get_open_orders_by_account(self, market_id: int, account_id: str) -> list[EngineOpenOrder]:
        result = await self._request("ob_query_user_orders", [market_id, account_id])
        return [EngineOpenOrder.model_validate(order) for order in result]

    async def get_account(self, account_id: str) -> EngineAccount:
        result = await self._request("core_query_account", [account_id])
        return EngineAccount.model_validate(result)

    async def get_market_configs(self) -> list[EngineMarketConfig]:
        result = await self._request("ob_query_open_markets", [])
        return [EngineMarketConfig.model_validate(market) for market in result]

    async def get_market_states(self) -> list[EngineMarketState]:
        result = await self._request("ob_query_markets_state", [])
        return [EngineMarketState.model_validate(market) for market in result]

    async def get_market_price(self, market_id: int) -> EngineMarketPrice:
        result = await self._request("core_query_price", [market_id])
        return EngineMarketPrice.model_validate(result)

    async def get_orderbook(self, market_id: int, take: int) -> Optional[EngineOrderbook]:
        """
        Get the order book of a market.

        Args:
            market_id: Market ID
            take: Maximum number of levels per side

        Returns:
            The order book, or None if the market has none
        """
        result = await self._request("ob_query_depth", [market_id, take])
        if result is None:
            return None
        return EngineOrderbook.model_validate(result)

    async def refresh_config(self) -> VenueConfig:
        """
        Fetch the venue configuration and replace the cached snapshot.

        Returns:
            The new snapshot
        """
        result = await self._request(self._config.config_method, [])
        venue_config = VenueConfig.model_validate(result)
        self._venue_config = venue_config
        self.logger.info(f"Loaded venue configuration via {self._config.config_method}: {venue_config.addresses}")
        return venue_config

    def set_config(self, config: VenueConfig) -> None:
        """Replace the cached venue configuration snapshot."""
        self._venue_config = config

    async def get_config(self) -> VenueConfig:
        """Get the venue configuration, fetching it on first use."""
        if self._venue_config is None:
            return await self.refresh_config()
        return self._venue_config

    async def _sign(self, signer: TypedDataSigner, typed_data: TypedData) -> str:
        self.logger.debug(f"Signing {typed_data.primary_type} for {signer.address}: {typed_data.message}")
        return await signer.sign_typed_data(typed_data)

    async def sign_place_order(
        self,
        signer: TypedDataSigner,
        params: EnginePlaceOrder,
        verifying_addr: Optional[str] = None,
    ) -> str:
        """
        Sign an order with the ``Order`` schema.

        Args:
            signer: Signer of the order
            params: Engine-shaped order
            verifying_addr: Verifying contract override (defaults to the order book contract)

        Returns:
            Hex-encoded signature
        """
        venue_config = await self.get_config()
        verifying_contract = verifying_addr or venue_config.addresses.offchain_book
        chain_id = venue_config.chain_id or DEFAULT_CHAIN_ID

        return await self._sign(signer, build_order_typed_data(params, chain_id, verifying_contract))

    async def sign_cancel_order(
        self,
        signer: TypedDataSigner,
        params: EngineCancelOrder,
        verifying_addr: Optional[str] = None,
    ) -> str:
        """
        Sign a cancellation with the ``Cancel`` schema.

        Args:
            signer: Signer of the cancellation
            params: Engine-shaped cancellation
            verifying_addr: Verifying contract override (defaults to the order book contract)

        Returns:
            Hex-encoded signature
        """
        venue_config = await self.get_config()
        verifying_contract = verifying_addr or venue_config.addresses.offchain_book
        chain_id = venue_config.chain_id or DEFAULT_CHAIN_ID

        return await self._sign(signer, build_cancel_typed_data(params, chain_id, verifying_contract))

    async def sign_add_trading_key(
        self,
        signer: TypedDataSigner,
        params: AddTradingKey,
        verifying_addr: Optional[str] = None,
    ) -> str:
        """
        Sign a trading key link with the ``LinkSigner`` schema.

        Args:
            signer: Wallet being linked
            params: Account, signer address and nonce
            verifying_addr: Verifying contract override (defaults to the endpoint contract)

        Returns:
            Hex-encoded signature
        """
        venue_config = await self.get_config()
        verifying_contract = verifying_addr or venue_config.addresses.endpoint
        chain_id = venue_config.chain_id or DEFAULT_CHAIN_ID

        return await self._sign(signer, build_link_signer_typed_data(params, chain_id, verifying_contract))

    async def close(self) -> None:
        """Close the underlying transport."""
        await self._transport.close()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()
