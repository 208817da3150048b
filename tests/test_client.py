"""Tests for the client-facing facade."""

import pytest
from eth_account import Account
from eth_account.messages import encode_typed_data

from foundation_sdk.perp_client.client import FoundationPerpClient
from foundation_sdk.perp_client.constants.enums import Side
from foundation_sdk.perp_client.models import ClientCancelOrder, ClientPlaceOrder
from tests.helpers.data import ACCOUNT_ID, ENDPOINT_ADDRESS, ORDERBOOK_ADDRESS, engine_market_config, engine_open_order


@pytest.mark.asyncio
async def test_get_orderbook_returns_levels_unchanged(client, fake_transport):
    fake_transport.handlers["ob_query_depth"] = {
        "market_id": 1,
        "asks": [["101.5", "2.0", "2.0"]],
        "bids": [],
    }

    orderbook = await client.get_orderbook(market_id=1, take=1000)

    assert fake_transport.calls_to("ob_query_depth") == [[1, 1000]]
    assert orderbook is not None
    assert orderbook.model_dump(by_alias=True, mode="json") == {
        "marketId": 1,
        "asks": [["101.5", "2.0", "2.0"]],
        "bids": [],
    }


@pytest.mark.asyncio
async def test_get_orderbook_default_depth_and_missing_book(client, fake_transport):
    fake_transport.handlers["ob_query_depth"] = None

    assert await client.get_orderbook(5) is None
    assert fake_transport.calls_to("ob_query_depth") == [[5, 1000]]


@pytest.mark.asyncio
async def test_missing_order_skips_mapping(client, fake_transport, monkeypatch):
    fake_transport.handlers["ob_query_order"] = None

    def fail(order):
        raise AssertionError("mapper must not be called")

    monkeypatch.setattr("foundation_sdk.perp_client.client.build_client_open_order", fail)

    assert await client.get_open_order_by_id(1, 42) is None


@pytest.mark.asyncio
async def test_get_open_orders_by_account(client, fake_transport):
    fake_transport.handlers["ob_query_user_orders"] = [engine_open_order(), engine_open_order(order_id=8, side="ask")]

    orders = await client.get_open_orders_by_account(1, ACCOUNT_ID)

    assert [(order.order_id, order.side) for order in orders] == [(7, Side.BID), (8, Side.ASK)]


@pytest.mark.asyncio
async def test_place_ask_signs_negative_amount(client, fake_transport, signer):
    fake_transport.handlers["ob_place_limit"] = 101

    order_id = await client.place_order(
        signer,
        ClientPlaceOrder(account_id=ACCOUNT_ID, market_id=1, side=Side.ASK, price="101.5", amount="10"),
    )

    assert order_id == 101
    typed_data = signer.signed[0]
    assert typed_data.primary_type == "Order"
    assert typed_data.message["amount"] == -10 * 10**18
    assert typed_data.domain["verifyingContract"] == ORDERBOOK_ADDRESS

    payload, signature = fake_transport.calls_to("ob_place_limit")[0]
    assert payload["side"] == "ask"
    assert payload["amount"] == "10"
    assert int(payload["nonce"]) == typed_data.message["nonce"]
    signable = encode_typed_data(typed_data.domain, typed_data.types, typed_data.message)
    assert Account.recover_message(signable, signature=signature) == signer.address


@pytest.mark.asyncio
async def test_place_bid_signs_positive_amount(client, fake_transport, signer):
    fake_transport.handlers["ob_place_limit"] = 102

    await client.place_order(
        signer,
        ClientPlaceOrder(account_id=ACCOUNT_ID, market_id=1, side=Side.BID, price="101.5", amount="10"),
    )

    assert signer.signed[0].message["amount"] == 10 * 10**18


@pytest.mark.asyncio
async def test_place_order_verifying_override(client, fake_transport, signer):
    fake_transport.handlers["ob_place_limit"] = 103
    override = "0x" + "ee" * 20

    await client.place_order(
        signer,
        ClientPlaceOrder(
            account_id=ACCOUNT_ID, market_id=1, side=Side.BID, price="1", amount="1", verifying_addr=override
        ),
    )

    assert signer.signed[0].domain["verifyingContract"] == override
    assert "verifying_addr" not in fake_transport.calls_to("ob_place_limit")[0][0]


@pytest.mark.asyncio
async def test_cancel_order(client, fake_transport, signer):
    fake_transport.handlers["ob_cancel"] = 7

    canceled = await client.cancel_order(
        signer, ClientCancelOrder(account_id=ACCOUNT_ID, market_id=1, order_id="7", nonce="55")
    )

    assert canceled == 7
    assert signer.signed[0].primary_type == "Cancel"
    assert signer.signed[0].message["orderId"] == 7
    assert fake_transport.calls_to("ob_cancel")[0][0] == {
        "account_id": ACCOUNT_ID,
        "market_id": 1,
        "order_id": "7",
        "nonce": "55",
    }


@pytest.mark.asyncio
async def test_add_trading_key_uses_engine_nonce(client, fake_transport, signer):
    fake_transport.handlers.update({"core_get_user_nonce": 9, "ob_add_trading_key": None})

    await client.add_trading_key(signer, ACCOUNT_ID)

    assert fake_transport.calls_to("core_get_user_nonce") == [[signer.address]]
    typed_data = signer.signed[0]
    assert typed_data.primary_type == "LinkSigner"
    assert typed_data.message["nonce"] == 9
    assert typed_data.domain["verifyingContract"] == ENDPOINT_ADDRESS
    link, nonce, _ = fake_transport.calls_to("ob_add_trading_key")[0]
    assert link == {"account_id": ACCOUNT_ID, "signer": signer.address}
    assert nonce == 9


@pytest.mark.asyncio
async def test_get_trading_key(client, fake_transport):
    fake_transport.handlers["ob_get_trading_key"] = ENDPOINT_ADDRESS

    assert await client.get_trading_key(ACCOUNT_ID) == ENDPOINT_ADDRESS


@pytest.mark.asyncio
async def test_market_reads(client, fake_transport):
    fake_transport.handlers.update(
        {
            "ob_query_open_markets": [engine_market_config()],
            "ob_query_markets_state": [
                {
                    "id": 1,
                    "open_interest": "3",
                    "cumulative_funding": "0.1",
                    "available_settle": "10",
                    "next_funding_rate": "0.0001",
                    "mark_price": "100",
                }
            ],
            "core_query_price": {"index_price": "100", "mark_price": "100.2", "last_price": None, "index_price_time": 1},
        }
    )

    markets = await client.get_market_configs()
    states = await client.get_market_states()
    price = await client.get_market_price(1)

    assert markets[0].ticker == "BTC-PERP"
    assert states[0].open_interest == "3"
    assert price.mark_price == "100.2"
    assert price.last_price is None


@pytest.mark.asyncio
async def test_market_states_are_not_cached(client, fake_transport):
    fake_transport.handlers["ob_query_markets_state"] = []

    await client.get_market_states()
    await client.get_market_states()

    assert len(fake_transport.calls_to("ob_query_markets_state")) == 2


@pytest.mark.asyncio
async def test_get_account(client, fake_transport):
    fake_transport.handlers["core_query_account"] = {
        "positions": {
            "3": {
                "base_amount": "1",
                "quote_amount": "-100",
                "last_cumulative_funding": "0",
                "frozen_in_bid_order": "0",
                "frozen_in_ask_order": "0.5",
                "unsettled_pnl": "0",
                "is_settle_pending": False,
            }
        },
        "collateral": "250",
        "is_in_liquidation_queue": False,
    }

    account = await client.get_account(ACCOUNT_ID)

    assert account.positions[0].market_id == 3
    assert account.positions[0].frozen_in_ask_order == "0.5"
    assert account.model_dump(by_alias=True)["isInLiquidationQueue"] is False


@pytest.mark.asyncio
async def test_client_context_manager_closes_transport(fake_transport, client_config):
    async with FoundationPerpClient(config=client_config, transport=fake_transport) as client:
        assert client.engine.transport is fake_transport

    assert fake_transport.closed is True
