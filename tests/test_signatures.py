"""Tests for EIP-712 typed data construction and local signing."""

import pytest
from eth_account import Account
from eth_account.messages import encode_typed_data

from foundation_sdk.perp_client.auth.signatures import (
    LocalKeySigner,
    TypedDataSigner,
    build_cancel_typed_data,
    build_link_signer_typed_data,
    build_order_typed_data,
)
from foundation_sdk.perp_client.constants.enums import SelfTradeBehavior, Side, TimeInForce
from foundation_sdk.perp_client.models.orders import AddTradingKey, EngineCancelOrder, EnginePlaceOrder
from tests.helpers.data import ACCOUNT_ID, ENDPOINT_ADDRESS, ORDERBOOK_ADDRESS, PRIVATE_KEY


def make_order(side: Side, amount: str = "10") -> EnginePlaceOrder:
    return EnginePlaceOrder(
        account_id=ACCOUNT_ID,
        market_id=1,
        side=side,
        price="101.5",
        amount=amount,
        time_in_force=TimeInForce.IOC,
        reduce_only=False,
        is_market_order=True,
        self_trade_behavior=SelfTradeBehavior.CANCEL_PROVIDE,
        nonce="1786706411520000005",
    )


def test_order_schema_field_order():
    typed_data = build_order_typed_data(make_order(Side.BID), 1, ORDERBOOK_ADDRESS)

    assert typed_data.primary_type == "Order"
    assert typed_data.types == {
        "Order": [
            {"name": "subaccount", "type": "bytes32"},
            {"name": "market", "type": "uint64"},
            {"name": "price", "type": "int128"},
            {"name": "amount", "type": "int128"},
            {"name": "nonce", "type": "uint64"},
            {"name": "expiration", "type": "uint64"},
            {"name": "triggerCondition", "type": "uint128"},
        ]
    }


def test_order_domain():
    typed_data = build_order_typed_data(make_order(Side.BID), 1, ORDERBOOK_ADDRESS)

    assert typed_data.domain == {
        "name": "FOUNDATION",
        "version": "0.1.0",
        "chainId": 1,
        "verifyingContract": ORDERBOOK_ADDRESS,
    }


def test_order_message_values():
    message = build_order_typed_data(make_order(Side.BID), 1, ORDERBOOK_ADDRESS).message

    assert message["subaccount"] == bytes.fromhex("11" * 32)
    assert message["market"] == 1
    assert message["price"] == 101_500_000_000_000_000_000
    assert message["nonce"] == 1786706411520000005
    assert message["expiration"] == (1 << 62) | (1 << 60)
    assert message["triggerCondition"] == 0


def test_ask_signs_negative_amount():
    bid = build_order_typed_data(make_order(Side.BID), 1, ORDERBOOK_ADDRESS).message
    ask = build_order_typed_data(make_order(Side.ASK), 1, ORDERBOOK_ADDRESS).message

    assert bid["amount"] == 10 * 10**18
    assert ask["amount"] == -10 * 10**18


def test_cancel_schema_and_message():
    cancel = EngineCancelOrder(account_id=ACCOUNT_ID, market_id=2, order_id="345", nonce="678")
    typed_data = build_cancel_typed_data(cancel, 1, ORDERBOOK_ADDRESS)

    assert typed_data.primary_type == "Cancel"
    assert [field["name"] for field in typed_data.types["Cancel"]] == ["subaccount", "market", "nonce", "orderId"]
    assert [field["type"] for field in typed_data.types["Cancel"]] == ["bytes32", "uint64", "uint64", "uint64"]
    assert typed_data.message["orderId"] == 345
    assert typed_data.message["nonce"] == 678


def test_link_signer_schema_and_message():
    signer = LocalKeySigner(PRIVATE_KEY)
    params = AddTradingKey(account_id=ACCOUNT_ID, signer=signer.address, nonce=3)
    typed_data = build_link_signer_typed_data(params, 1, ENDPOINT_ADDRESS)

    assert typed_data.primary_type == "LinkSigner"
    assert typed_data.types == {
        "LinkSigner": [
            {"name": "sender", "type": "bytes32"},
            {"name": "signer", "type": "address"},
            {"name": "nonce", "type": "uint64"},
        ]
    }
    assert typed_data.message == {"sender": bytes.fromhex("11" * 32), "signer": signer.address, "nonce": 3}
    assert typed_data.domain["verifyingContract"] == ENDPOINT_ADDRESS


def test_local_key_signer_is_a_typed_data_signer():
    assert isinstance(LocalKeySigner(PRIVATE_KEY), TypedDataSigner)


def test_local_key_signer_requires_key():
    with pytest.raises(ValueError, match="Private key"):
        LocalKeySigner("")


@pytest.mark.asyncio
async def test_order_signature_recovers_signer():
    signer = LocalKeySigner(PRIVATE_KEY)
    typed_data = build_order_typed_data(make_order(Side.ASK), 1, ORDERBOOK_ADDRESS)

    signature = await signer.sign_typed_data(typed_data)

    assert signature.startswith("0x")
    assert len(signature) == 2 + 65 * 2
    signable = encode_typed_data(typed_data.domain, typed_data.types, typed_data.message)
    assert Account.recover_message(signable, signature=signature) == signer.address


@pytest.mark.asyncio
async def test_signature_depends_on_verifying_contract():
    signer = LocalKeySigner(PRIVATE_KEY)
    cancel = EngineCancelOrder(account_id=ACCOUNT_ID, market_id=2, order_id="345", nonce="678")

    first = await signer.sign_typed_data(build_cancel_typed_data(cancel, 1, ORDERBOOK_ADDRESS))
    second = await signer.sign_typed_data(build_cancel_typed_data(cancel, 1, ENDPOINT_ADDRESS))

    assert first != second
