import asyncio

import pytest

from tradedesk.exceptions import StoreError
from tradedesk.services.repository import Repository

from conftest import make_price, make_trade


class BrokenStore:
    async def get(self, key):
        raise RuntimeError("connection refused")

    async def set(self, key, value):
        raise RuntimeError("connection refused")


def test_empty_store_reads_as_empty_collections(repo):
    assert asyncio.run(repo.load_trades()) == []
    assert asyncio.run(repo.load_prices()) == []


def test_trades_are_appended_in_order(repo):
    asyncio.run(repo.append_trades([make_trade("T2"), make_trade("T1")]))
    size = asyncio.run(repo.append_trades([make_trade("T1")]))

    trades = asyncio.run(repo.load_trades())

    assert size == 3
    assert [t.trade_id for t in trades] == ["T2", "T1", "T1"]


def test_prices_are_replaced_not_merged(repo):
    asyncio.run(repo.replace_prices([make_price("WTI-CRUDE"), make_price("GOLD")]))
    asyncio.run(repo.replace_prices([make_price("COPPER")]))

    prices = asyncio.run(repo.load_prices())

    assert [p.instrument for p in prices] == ["COPPER"]


def test_collections_are_stored_under_fixed_keys(store, repo):
    asyncio.run(repo.append_trades([make_trade("T1")]))
    asyncio.run(repo.replace_prices([make_price()]))

    stored_trades = asyncio.run(store.get("trades"))
    stored_prices = asyncio.run(store.get("market_prices"))

    assert stored_trades[0]["trade_id"] == "T1"
    assert stored_trades[0]["side"] == "BUY"
    assert stored_prices == [
        {"instrument": "WTI-CRUDE", "price_date": "2024-01-17", "close_price": 76.0}
    ]


def test_clears_write_empty_collections(repo):
    asyncio.run(repo.append_trades([make_trade("T1")]))
    asyncio.run(repo.replace_prices([make_price()]))

    asyncio.run(repo.clear_trades())
    assert asyncio.run(repo.load_trades()) == []
    assert len(asyncio.run(repo.load_prices())) == 1

    asyncio.run(repo.clear_prices())
    assert asyncio.run(repo.load_prices()) == []


def test_store_failures_raise_store_error():
    repo = Repository(BrokenStore())

    with pytest.raises(StoreError, match="connection refused"):
        asyncio.run(repo.load_trades())
    with pytest.raises(StoreError, match="connection refused"):
        asyncio.run(repo.clear_prices())
