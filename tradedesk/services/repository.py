# tradedesk/services/repository.py
from typing import Any, List

from tradedesk.config import settings
from tradedesk.database import KVStore
from tradedesk.exceptions import StoreError
from tradedesk.models.trade_model import MarketPrice, Trade


class Repository:
    """
    The trade and market-price collections over a key-value store.

    Each collection lives under one key as an ordered list. Trades are only
    ever appended; prices are only ever replaced wholesale. Every write is a
    read-modify-write of the full list with no locking, so concurrent writers
    can overwrite each other (last write wins).
    """

    def __init__(
        self,
        store: KVStore,
        trades_key: str = settings.TRADES_KEY,
        prices_key: str = settings.MARKET_PRICES_KEY,
    ):
        self.store = store
        self.trades_key = trades_key
        self.prices_key = prices_key

    async def _read(self, key: str) -> List[Any]:
        try:
            value = await self.store.get(key)
        except Exception as e:
            raise StoreError(str(e)) from e
        return value or []

    async def _write(self, key: str, value: List[Any]) -> None:
        try:
            await self.store.set(key, value)
        except Exception as e:
            raise StoreError(str(e)) from e

    async def load_trades(self) -> List[Trade]:
        return [Trade.model_validate(t) for t in await self._read(self.trades_key)]

    async def load_prices(self) -> List[MarketPrice]:
        return [
            MarketPrice.model_validate(p) for p in await self._read(self.prices_key)
        ]

    async def append_trades(self, trades: List[Trade]) -> int:
        """Append to the stored trades and return the new collection size."""
        existing = await self._read(self.trades_key)
        combined = existing + [t.model_dump() for t in trades]
        await self._write(self.trades_key, combined)
        return len(combined)

    async def replace_prices(self, prices: List[MarketPrice]) -> None:
        await self._write(self.prices_key, [p.model_dump() for p in prices])

    async def clear_trades(self) -> None:
        await self._write(self.trades_key, [])

    async def clear_prices(self) -> None:
        await self._write(self.prices_key, [])

    async def ping(self) -> None:
        await self._read(self.trades_key)
