"""
Pytest fixtures for the Foundation perpetual client tests.

The engine is replaced by an in-memory transport; signing uses a real local key.
"""

import pytest

from foundation_sdk.perp_client.client import FoundationPerpClient
from foundation_sdk.perp_client.config import ClientConfig
from foundation_sdk.perp_client.engine import FoundationPerpEngine
from tests.helpers import FakeTransport, RecordingSigner
from tests.helpers.data import PRIVATE_KEY, VENUE_CONFIG


@pytest.fixture
def fake_transport() -> FakeTransport:
    return FakeTransport({"core_get_config": VENUE_CONFIG})


@pytest.fixture
def client_config() -> ClientConfig:
    return ClientConfig(rpc_url="http://engine.test/rpc")


@pytest.fixture
def engine(fake_transport: FakeTransport, client_config: ClientConfig) -> FoundationPerpEngine:
    return FoundationPerpEngine(config=client_config, transport=fake_transport)


@pytest.fixture
def client(fake_transport: FakeTransport, client_config: ClientConfig) -> FoundationPerpClient:
    return FoundationPerpClient(config=client_config, transport=fake_transport)


@pytest.fixture
def signer() -> RecordingSigner:
    return RecordingSigner(PRIVATE_KEY)
