"""
Conversion utilities for the Foundation perpetual client.

Prices and amounts travel as decimal strings and are only turned into
fixed-point integers for signing.
"""

from typing import Union

from decimal import Decimal, localcontext

DECIMALS = 18

# wide enough for any int128 scaled value
FIXED_POINT_PRECISION = 80


def to_fixed_point(value: Union[str, int, Decimal], decimals: int = DECIMALS) -> int:
    """
    Convert a decimal value to a fixed-point integer.

    Args:
        value: Decimal value, usually the string sent to the engine
        decimals: Number of decimal places of the fixed-point representation

    Returns:
        Value scaled by ``10**decimals``, truncated toward zero
    """
    if not isinstance(value, Decimal):
        value = Decimal(str(value))

    with localcontext() as ctx:
        ctx.prec = FIXED_POINT_PRECISION
        return int(value * Decimal(10**decimals))


def from_fixed_point(value: Union[str, int], decimals: int = DECIMALS) -> Decimal:
    """
    Convert a fixed-point integer back to a Decimal.

    Args:
        value: Fixed-point integer
        decimals: Number of decimal places of the fixed-point representation

    Returns:
        Decimal value
    """
    with localcontext() as ctx:
        ctx.prec = FIXED_POINT_PRECISION
        return Decimal(int(value)) / Decimal(10**decimals)
