import os
import tempfile

# Settings are read at import time, so point them at in-memory storage first
os.environ.setdefault("STORE_BACKEND", "memory")
os.environ.setdefault("LOG_DIR", tempfile.mkdtemp(prefix="tradedesk-logs-"))

import pytest
from fastapi.testclient import TestClient

from tradedesk.database import MemoryKVStore, get_store
from tradedesk.main import app
from tradedesk.models.trade_model import MarketPrice, Trade
from tradedesk.services.repository import Repository


TRADES_CSV = """trade_id,trade_date,trader,instrument,side,quantity,trade_price,currency
T1,2024-01-15,Alice,WTI-CRUDE,buy,1000,75.50,USD
T2,2024-01-15,Bob,BRENT-CRUDE,SELL,500,80.25,USD
T3,2024-01-16,,WTI-CRUDE,Buy,200,76.10,
T4,2024-01-17,Alice,NAT-GAS,SELL,10000,2.55,USD
"""

PRICES_CSV = """instrument,price_date,close_price
WTI-CRUDE,2024-01-15,75.80
WTI-CRUDE,2024-01-17,76.00
BRENT-CRUDE,2024-01-17,80.00
"""


def make_trade(trade_id="T1", **overrides) -> Trade:
    fields = {
        "trade_id": trade_id,
        "trade_date": "2024-01-15",
        "trader": "Alice",
        "instrument": "WTI-CRUDE",
        "side": "BUY",
        "quantity": 1000.0,
        "trade_price": 75.50,
        "currency": "USD",
    }
    fields.update(overrides)
    return Trade(**fields)


def make_price(instrument="WTI-CRUDE", price_date="2024-01-17", close_price=76.0):
    return MarketPrice(
        instrument=instrument, price_date=price_date, close_price=close_price
    )


@pytest.fixture
def store():
    return MemoryKVStore()


@pytest.fixture
def repo(store):
    return Repository(store)


@pytest.fixture
def client(store):
    app.dependency_overrides[get_store] = lambda: store
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()
