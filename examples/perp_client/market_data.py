#!/usr/bin/env python3
"""
Example script reading markets, prices and order books from the Foundation perpetual engine.

The engine URL is read from FOUNDATION_RPC_URL (defaults to testnet).
"""
import asyncio
import time

from dotenv import load_dotenv

from foundation_sdk.perp_client import FoundationPerpClient


async def main():
    """Print every open market with its price and top of book."""
    load_dotenv()

    async with FoundationPerpClient() as client:
        venue_config = await client.engine.get_config()
        print(f"Chain ID: {venue_config.chain_id}, order book contract: {venue_config.addresses.offchain_book}")

        markets = await client.get_market_configs()
        states = {state.id: state for state in await client.get_market_states()}
        now_ms = int(time.time() * 1000)

        for market in markets:
            print(f"\n--- {market.ticker} (market {market.id}) ---")
            print(f"  Tradable: {market.is_tradable(now_ms)}")
            print(f"  Tick size: {market.tick_size}, step size: {market.step_size}")

            state = states.get(market.id)
            if state:
                print(f"  Open interest: {state.open_interest}, next funding rate: {state.next_funding_rate}")

            price = await client.get_market_price(market.id)
            print(f"  Index: {price.index_price}, mark: {price.mark_price}")

            orderbook = await client.get_orderbook(market.id, take=5)
            if orderbook is None:
                print("  No order book")
                continue
            best_bid = orderbook.bids[0] if orderbook.bids else None
            best_ask = orderbook.asks[0] if orderbook.asks else None
            print(f"  Best bid: {best_bid}, best ask: {best_ask}")


if __name__ == "__main__":
    asyncio.run(main())
