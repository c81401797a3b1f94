# tradedesk/database.py
import copy
from typing import Any, Dict, Optional, Protocol

from motor.motor_asyncio import AsyncIOMotorClient

from tradedesk.config import settings
from tradedesk.utils.logger import logger


class KVStore(Protocol):
    async def get(self, key: str) -> Optional[Any]: ...

    async def set(self, key: str, value: Any) -> None: ...


class MemoryKVStore:
    """In-process store. Values are deep-copied so callers never share state."""

    def __init__(self):
        self._data: Dict[str, Any] = {}

    async def get(self, key: str) -> Optional[Any]:
        if key not in self._data:
            return None
        return copy.deepcopy(self._data[key])

    async def set(self, key: str, value: Any) -> None:
        self._data[key] = copy.deepcopy(value)


class MongoKVStore:
    """One document per key: {"_id": key, "value": ...}."""

    def __init__(self, uri: str, db_name: str, collection: str):
        self.client = AsyncIOMotorClient(uri)
        self.collection = self.client[db_name][collection]

    async def get(self, key: str) -> Optional[Any]:
        doc = await self.collection.find_one({"_id": key})
        if doc is None:
            return None
        return doc.get("value")

    async def set(self, key: str, value: Any) -> None:
        await self.collection.replace_one(
            {"_id": key}, {"_id": key, "value": value}, upsert=True
        )

    async def ping(self) -> None:
        await self.client.admin.command("ping")


def build_store(backend: str) -> KVStore:
    if backend == "memory":
        return MemoryKVStore()
    if backend == "mongo":
        return MongoKVStore(
            settings.MONGO_URI, settings.MONGO_DB, settings.KV_COLLECTION
        )
    raise ValueError(f"Unknown STORE_BACKEND: {backend}")


store = build_store(settings.STORE_BACKEND)


def get_store() -> KVStore:
    """FastAPI dependency returning the configured store."""
    return store


async def init_db():
    """Check the store is reachable before serving requests"""
    if isinstance(store, MongoKVStore):
        await store.ping()
        logger.info(
            f"Connected to MongoDB {settings.MONGO_DB}.{settings.KV_COLLECTION}"
        )
    else:
        logger.info(f"Using {settings.STORE_BACKEND} key-value store")
