"""
Signature generation for Foundation engine requests.

This module defines the EIP-712 domain and the three struct schemas checked by
the engine's verifying contracts (``Order``, ``Cancel`` and ``LinkSigner``),
builds typed data for them, and provides the signer capability used by the
client. Struct names, field names, field types and field order must match the
contracts exactly.
"""

from typing import Any, Protocol, runtime_checkable

from dataclasses import dataclass

from eth_account import Account
from hexbytes import HexBytes

from foundation_sdk.perp_client.constants.enums import Side
from foundation_sdk.perp_client.models.orders import AddTradingKey, EngineCancelOrder, EnginePlaceOrder
from foundation_sdk.perp_client.utils.converters import DECIMALS, to_fixed_point
from foundation_sdk.perp_client.utils.encoding import encode_expiration, encode_trigger_condition

EIP712_DOMAIN_NAME = "FOUNDATION"
EIP712_DOMAIN_VERSION = "0.1.0"
DEFAULT_CHAIN_ID = 1

ORDER_TYPES: dict[str, list[dict[str, str]]] = {
    "Order": [
        {"name": "subaccount", "type": "bytes32"},
        {"name": "market", "type": "uint64"},
        {"name": "price", "type": "int128"},
        {"name": "amount", "type": "int128"},
        {"name": "nonce", "type": "uint64"},
        {"name": "expiration", "type": "uint64"},
        {"name": "triggerCondition", "type": "uint128"},
    ],
}

CANCEL_TYPES: dict[str, list[dict[str, str]]] = {
    "Cancel": [
        {"name": "subaccount", "type": "bytes32"},
        {"name": "market", "type": "uint64"},
        {"name": "nonce", "type": "uint64"},
        {"name": "orderId", "type": "uint64"},
    ],
}

LINK_SIGNER_TYPES: dict[str, list[dict[str, str]]] = {
    "LinkSigner": [
        {"name": "sender", "type": "bytes32"},
        {"name": "signer", "type": "address"},
        {"name": "nonce", "type": "uint64"},
    ],
}


@dataclass(frozen=True)
class TypedData:
    """An EIP-712 payload ready to be signed."""

    domain: dict[str, Any]
    types: dict[str, list[dict[str, str]]]
    primary_type: str
    message: dict[str, Any]


@runtime_checkable
class TypedDataSigner(Protocol):
    """
    Anything able to produce an EIP-712 signature.

    A raw private key, a smart account or a hardware wallet bridge only needs an
    ``address`` and an awaitable ``sign_typed_data``.
    """

    @property
    def address(self) -> str: ...

    async def sign_typed_data(self, typed_data: TypedData) -> str: ...


class LocalKeySigner:
    """Sign typed data with a private key held in memory."""

    def __init__(self, private_key: str):
        """
        Initialize the signer.

        Args:
            private_key: Hex-encoded private key
        """
        if not private_key:
            raise ValueError("Private key is required for signing")

        self._private_key = private_key
        self._address: str = str(Account.from_key(private_key).address)

    @property
    def address(self) -> str:
        """Get the public address derived from the private key."""
        return self._address

    async def sign_typed_data(self, typed_data: TypedData) -> str:
        """
        Sign typed data.

        Args:
            typed_data: Domain, struct schema and message to sign

        Returns:
            Hex-encoded signature
        """
        signed_message = Account.sign_typed_data(
            self._private_key, typed_data.domain, typed_data.types, typed_data.message
        )

        signature = signed_message.signature.hex()
        return signature if signature.startswith("0x") else f"0x{signature}"


def build_domain(chain_id: int, verifying_contract: str) -> dict[str, Any]:
    return {
        "name": EIP712_DOMAIN_NAME,
        "version": EIP712_DOMAIN_VERSION,
        "chainId": chain_id,
        "verifyingContract": verifying_contract,
    }


def signed_amount(side: Side, amount: str) -> int:
    """Fixed-point amount as signed in an ``Order``: positive for bids, negative for asks."""
    scaled = to_fixed_point(amount, DECIMALS)
    return scaled if Side(side) == Side.BID else -scaled


def build_order_typed_data(order: EnginePlaceOrder, chain_id: int, verifying_contract: str) -> TypedData:
    """
    Build the ``Order`` typed data for an order placement.

    Args:
        order: Engine-shaped order payload
        chain_id: Chain ID of the domain
        verifying_contract: Address of the order book contract

    Returns:
        Typed data for the order
    """
    return TypedData(
        domain=build_domain(chain_id, verifying_contract),
        types=ORDER_TYPES,
        primary_type="Order",
        message={
            "subaccount": HexBytes(order.account_id),
            "market": order.market_id,
            "price": to_fixed_point(order.price, DECIMALS),
            "amount": signed_amount(order.side, order.amount),
            "nonce": int(order.nonce),
            "expiration": encode_expiration(order),
            "triggerCondition": encode_trigger_condition(order),
        },
    )


def build_cancel_typed_data(cancel: EngineCancelOrder, chain_id: int, verifying_contract: str) -> TypedData:
    """Build the ``Cancel`` typed data for an order cancellation."""
    return TypedData(
        domain=build_domain(chain_id, verifying_contract),
        types=CANCEL_TYPES,
        primary_type="Cancel",
        message={
            "subaccount": HexBytes(cancel.account_id),
            "market": cancel.market_id,
            "nonce": int(cancel.nonce),
            "orderId": int(cancel.order_id),
        },
    )


def build_link_signer_typed_data(params: AddTradingKey, chain_id: int, verifying_contract: str) -> TypedData:
    """Build the ``LinkSigner`` typed data linking a trading key to an account."""
    return TypedData(
        domain=build_domain(chain_id, verifying_contract),
        types=LINK_SIGNER_TYPES,
        primary_type="LinkSigner",
        message={
            "sender": HexBytes(params.account_id),
            "signer": params.signer,
            "nonce": params.nonce,
        },
    )
