"""
Nonce and bitfield encoding for Foundation orders.

The layouts here are decoded bit for bit by the engine.
"""

from typing import Optional

import secrets
import time

from foundation_sdk.perp_client.constants.enums import SelfTradeBehavior, TimeInForce
from foundation_sdk.perp_client.models.orders import EnginePlaceOrder, OrderExpiration

NONCE_TIMEOUT_MS = 10_000
NONCE_SUB_BITS = 20
NONCE_SUB_RANGE = 1000

EXPIRES_AT_BITS = 58
EXPIRES_AT_MASK = (1 << EXPIRES_AT_BITS) - 1
TRIGGER_CONDITION_BITS = 128

TIME_IN_FORCES: list[TimeInForce] = list(TimeInForce)
SELF_TRADE_BEHAVIORS: list[SelfTradeBehavior] = list(SelfTradeBehavior)


def _now_ms() -> int:
    return time.time_ns() // 1_000_000


def generate_order_nonce(sub: Optional[int] = None) -> str:
    """
    Generate an order nonce.

    The nonce is ``(expire_at_ms << 20) | sub`` where ``expire_at_ms`` is ten
    seconds from now. The engine reads the upper bits as the point after which
    the nonce is no longer accepted.

    Args:
        sub: Low sub-component; random in [0, 1000) when omitted

    Returns:
        Nonce as a decimal string
    """
    expire_at = _now_ms() + NONCE_TIMEOUT_MS
    if sub is None:
        sub = secrets.randbelow(NONCE_SUB_RANGE)

    return str((expire_at << NONCE_SUB_BITS) | sub)


def encode_expiration(order: EnginePlaceOrder) -> int:
    """
    Pack the order flags and expiration time into the 64-bit expiration field.

    Layout, most significant first: time in force (2 bits), reduce only (1 bit),
    market order (1 bit), self-trade behavior (2 bits), expiration epoch seconds
    (58 bits, 0 = never expires).

    Raises:
        ValueError: If expires_at does not fit in 58 bits
    """
    expires_at = order.expires_at or 0
    if expires_at < 0 or expires_at > EXPIRES_AT_MASK:
        raise ValueError("expires_at is out of range")

    tif = TIME_IN_FORCES.index(TimeInForce(order.time_in_force))
    stb = SELF_TRADE_BEHAVIORS.index(SelfTradeBehavior(order.self_trade_behavior))

    return (
        (tif << 62)
        | (int(order.reduce_only) << 61)
        | (int(order.is_market_order) << 60)
        | (stb << 58)
        | expires_at
    )


def decode_expiration(value: int) -> OrderExpiration:
    """Inverse of :func:`encode_expiration`."""
    expires_at = value & EXPIRES_AT_MASK
    return OrderExpiration(
        time_in_force=TIME_IN_FORCES[(value >> 62) & 0b11],
        reduce_only=bool((value >> 61) & 1),
        is_market_order=bool((value >> 60) & 1),
        self_trade_behavior=SELF_TRADE_BEHAVIORS[(value >> 58) & 0b11],
        expires_at=expires_at or None,
    )


def encode_trigger_condition(order: EnginePlaceOrder) -> int:
    """
    Encode the trigger condition field of an order.

    Orders without a trigger encode to 0. A trigger condition is taken as the
    already encoded 128-bit value and passed through unchanged.

    Raises:
        ValueError: If the trigger condition does not fit in 128 bits
    """
    if order.trigger_condition is None:
        return 0
    if order.trigger_condition < 0 or order.trigger_condition >= 2**TRIGGER_CONDITION_BITS:
        raise ValueError("trigger_condition is out of range")

    return order.trigger_condition
