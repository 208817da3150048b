"""
Enumeration classes for the Foundation perpetual engine.

The member order of ``TimeInForce`` and ``SelfTradeBehavior`` is part of the
order expiration bitfield: the engine decodes the member index.
"""

from enum import Enum


class Side(str, Enum):
    """Order side"""

    BID = "bid"
    ASK = "ask"


class TimeInForce(str, Enum):
    """Order time in force"""

    DEFAULT = "default"
    IOC = "ioc"
    FOK = "fok"
    POST_ONLY = "post_only"


class SelfTradeBehavior(str, Enum):
    """How the engine resolves an order crossing a resting order of the same account"""

    CANCEL_PROVIDE = "cancel_provide"
    CANCEL_TAKE = "cancel_take"
    CANCEL_BOTH = "cancel_both"
    EXPIRE_MAKER = "expire_maker"


class OrderTag(str, Enum):
    """Intent of an open order"""

    LIMIT = "limit"
    MARKET = "market"
    STOP_LOSS = "stop_loss"
    TAKE_PROFIT = "take_profit"


class OrderSource(str, Enum):
    """Origin of an order inside the engine"""

    TRADE = "Trade"
    LIQUIDATE = "Liquidate"
    INSURANCE_FUND_COVER = "InsuranceFundCover"
    DELEVERAGE = "Deleverage"
    DELIST = "Delist"
