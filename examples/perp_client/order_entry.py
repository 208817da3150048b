#!/usr/bin/env python3
"""
Example script placing and cancelling a limit order with the Foundation perpetual client.

Before running this example, ensure you have a .env file with the following variables:
- FOUNDATION_RPC_URL: Engine RPC URL (http(s) or ws(s))
- FOUNDATION_PRIVATE_KEY: Private key of the trading key
- ACCOUNT_ID: Your Foundation account ID (bytes32 hex)
"""
import asyncio
import os

from dotenv import load_dotenv

from foundation_sdk.perp_client import ClientConfig, FoundationPerpClient, LocalKeySigner
from foundation_sdk.perp_client.constants.enums import Side, TimeInForce
from foundation_sdk.perp_client.models.orders import ClientCancelOrder, ClientPlaceOrder

MARKET_ID = 1


async def main():
    """Place a post-only bid below the mark price, then cancel it."""
    load_dotenv()

    config = ClientConfig.from_env()
    account_id = os.environ.get("ACCOUNT_ID")
    if not config.private_key or not account_id:
        print("Error: FOUNDATION_PRIVATE_KEY and ACCOUNT_ID must be set in your .env file.")
        return

    signer = LocalKeySigner(config.private_key)
    print(f"Using trading key: {signer.address}")

    async with FoundationPerpClient(config=config) as client:
        trading_key = await client.get_trading_key(account_id)
        if trading_key is None or trading_key.lower() != signer.address.lower():
            print("Linking trading key to the account...")
            await client.add_trading_key(signer, account_id)

        price = await client.get_market_price(MARKET_ID)
        bid_price = f"{float(price.mark_price) * 0.9:.2f}"
        print(f"Mark price: {price.mark_price}, placing bid at {bid_price}")

        order_id = await client.place_order(
            signer,
            ClientPlaceOrder(
                account_id=account_id,
                market_id=MARKET_ID,
                side=Side.BID,
                price=bid_price,
                amount="0.01",
                time_in_force=TimeInForce.POST_ONLY,
            ),
        )
        print(f"Placed order {order_id}")

        order = await client.get_open_order_by_id(MARKET_ID, order_id)
        print(f"Open order: {order}")

        cancelled = await client.cancel_order(
            signer,
            ClientCancelOrder(account_id=account_id, market_id=MARKET_ID, order_id=str(order_id)),
        )
        print(f"Cancelled order {cancelled}")


if __name__ == "__main__":
    asyncio.run(main())
