# tradedesk/utils/dependencies.py
from fastapi import Depends

from tradedesk.database import KVStore, get_store
from tradedesk.services.repository import Repository


def get_repository(store: KVStore = Depends(get_store)) -> Repository:
    """Repository over the configured store, one per request"""
    return Repository(store)
