"""
Configuration settings for the Foundation perpetual client.
"""

from typing import Optional

import os
from dataclasses import dataclass

from dotenv import load_dotenv

TESTNET_RPC_URL = "https://testnet-rpc.foundation.network/perpetual"

CONFIG_METHOD = "core_get_config"
TRADING_CONFIG_METHOD = "core_get_trading_config"
CONFIG_METHODS = (CONFIG_METHOD, TRADING_CONFIG_METHOD)

DEFAULT_REQUEST_TIMEOUT = 30.0


@dataclass
class ClientConfig:
    """Configuration for the Foundation perpetual client"""

    rpc_url: str = TESTNET_RPC_URL
    config_method: str = CONFIG_METHOD
    request_timeout: float = DEFAULT_REQUEST_TIMEOUT
    private_key: Optional[str] = None

    def __post_init__(self):
        if self.config_method not in CONFIG_METHODS:
            raise ValueError(f"config_method must be one of {CONFIG_METHODS}, got {self.config_method!r}")

    @property
    def is_websocket(self) -> bool:
        """Whether the RPC URL selects the WebSocket transport"""
        return self.rpc_url.startswith("ws")

    @classmethod
    def from_env(cls) -> "ClientConfig":
        """Create a config instance from environment variables."""
        load_dotenv()

        return cls(
            rpc_url=os.environ.get("FOUNDATION_RPC_URL", TESTNET_RPC_URL),
            config_method=os.environ.get("FOUNDATION_CONFIG_METHOD", CONFIG_METHOD),
            request_timeout=float(os.environ.get("FOUNDATION_REQUEST_TIMEOUT", DEFAULT_REQUEST_TIMEOUT)),
            private_key=os.environ.get("FOUNDATION_PRIVATE_KEY"),
        )


def get_config() -> ClientConfig:
    """Get configuration from environment."""
    return ClientConfig.from_env()
