"""
EIP-712 signing for Foundation engine requests.
"""

from foundation_sdk.perp_client.auth.signatures import LocalKeySigner, TypedData, TypedDataSigner

__all__ = ["LocalKeySigner", "TypedData", "TypedDataSigner"]
