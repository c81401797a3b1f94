# tradedesk/routers/trades.py
from typing import Any, Dict, Optional

from fastapi import APIRouter, Body, Depends, Query, Request

from tradedesk.config import settings
from tradedesk.models.trade_model import (
    OperationResult,
    TradeCreated,
    TradeFilters,
    TradePage,
    TradeUploadResult,
)
from tradedesk.services import trading
from tradedesk.services.repository import Repository
from tradedesk.utils.decorators import api_operation
from tradedesk.utils.dependencies import get_repository
from tradedesk.utils.helpers import read_upload_text

router = APIRouter()


@router.post("/upload", response_model=TradeUploadResult)
@api_operation("upload trades")
async def upload_trades(request: Request, repo: Repository = Depends(get_repository)):
    """
    Upload a trades CSV in the multipart field `file` (file or plain text).

    Valid rows are appended; the first invalid rows are returned with their
    errors.
    """
    csv_text = await read_upload_text(request)
    return await trading.upload_trades(repo, csv_text)


@router.post("", response_model=TradeCreated)
@api_operation("create trade")
async def create_trade(
    record: Dict[str, Any] = Body(...),
    repo: Repository = Depends(get_repository),
):
    """Validate and append a single trade."""
    return await trading.create_trade(repo, record)


@router.get("", response_model=TradePage)
@api_operation("fetch trades")
async def list_trades(
    from_date: Optional[str] = Query(None, alias="from"),
    to_date: Optional[str] = Query(None, alias="to"),
    instrument: Optional[str] = Query(
        None, description="Case-insensitive substring of the instrument"
    ),
    trader: Optional[str] = Query(
        None, description="Case-insensitive substring of the trader"
    ),
    page: int = Query(1, ge=1),
    limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1),
    repo: Repository = Depends(get_repository),
):
    """
    Filtered trades ordered by the numeric part of trade_id, one page at a
    time.
    """
    filters = TradeFilters(
        from_date=from_date, to_date=to_date, instrument=instrument, trader=trader
    )
    return await trading.list_trades(repo, filters, page, limit)


@router.delete("", response_model=OperationResult)
@api_operation("clear trades")
async def clear_trades(repo: Repository = Depends(get_repository)):
    await trading.clear_trades(repo)
    return OperationResult(message="All trades cleared")
