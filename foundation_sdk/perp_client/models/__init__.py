"""
Data models for the Foundation perpetual client.
"""

from .account import ClientAccount, ClientPosition, EngineAccount, EnginePosition
from .markets import (
    ClientMarketConfig,
    ClientMarketPrice,
    ClientMarketState,
    ClientOrderbook,
    EngineMarketConfig,
    EngineMarketPrice,
    EngineMarketState,
    EngineOrderbook,
    OrderbookItem,
)
from .orders import (
    AddTradingKey,
    ClientCancelOrder,
    ClientOpenOrder,
    ClientPlaceOrder,
    EngineCancelOrder,
    EngineOpenOrder,
    EnginePlaceOrder,
    OrderExpiration,
)
from .venue import AddressConfig, FeeTier, VenueConfig

__all__ = [
    "AddTradingKey",
    "AddressConfig",
    "ClientAccount",
    "ClientCancelOrder",
    "ClientMarketConfig",
    "ClientMarketPrice",
    "ClientMarketState",
    "ClientOpenOrder",
    "ClientOrderbook",
    "ClientPlaceOrder",
    "ClientPosition",
    "EngineAccount",
    "EngineCancelOrder",
    "EngineMarketConfig",
    "EngineMarketPrice",
    "EngineMarketState",
    "EngineOpenOrder",
    "EngineOrderbook",
    "EnginePlaceOrder",
    "EnginePosition",
    "FeeTier",
    "OrderExpiration",
    "VenueConfig",
]
