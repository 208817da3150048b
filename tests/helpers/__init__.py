"""Test helpers for the Foundation perpetual client tests."""

from .fake_transport import FakeTransport
from .signers import RecordingSigner

__all__ = ["FakeTransport", "RecordingSigner"]
