"""
Utility functions for the Foundation perpetual client.
"""

from foundation_sdk.perp_client.utils.converters import DECIMALS, from_fixed_point, to_fixed_point
from foundation_sdk.perp_client.utils.encoding import (
    decode_expiration,
    encode_expiration,
    encode_trigger_condition,
    generate_order_nonce,
)

__all__ = [
    "DECIMALS",
    "decode_expiration",
    "encode_expiration",
    "encode_trigger_condition",
    "from_fixed_point",
    "generate_order_nonce",
    "to_fixed_point",
]
