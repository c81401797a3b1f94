# tradedesk/routers/analytics.py
from typing import Optional

from fastapi import APIRouter, Depends, Query

from tradedesk.models.trade_model import DashboardStats, PnLReport, TradeFilters
from tradedesk.services import trading
from tradedesk.services.repository import Repository
from tradedesk.utils.decorators import api_operation
from tradedesk.utils.dependencies import get_repository

router = APIRouter()


@router.get("/pnl", response_model=PnLReport)
@api_operation("calculate P&L")
async def get_pnl(
    from_date: Optional[str] = Query(None, alias="from"),
    to_date: Optional[str] = Query(None, alias="to"),
    instrument: Optional[str] = Query(None, description="Exact instrument name"),
    repo: Repository = Depends(get_repository),
):
    """
    Mark-to-market P&L of the filtered trades against the latest market
    price of each instrument, with daily and per-instrument rollups.
    """
    filters = TradeFilters(from_date=from_date, to_date=to_date, instrument=instrument)
    return await trading.pnl_report(repo, filters)


@router.get("/stats", response_model=DashboardStats)
@api_operation("fetch stats")
async def get_stats(repo: Repository = Depends(get_repository)):
    return await trading.dashboard_stats(repo)


@router.get("/instruments")
@api_operation("fetch instruments")
async def get_instruments(repo: Repository = Depends(get_repository)):
    return {"instruments": await trading.list_instruments(repo)}


@router.get("/traders")
@api_operation("fetch traders")
async def get_traders(repo: Repository = Depends(get_repository)):
    return {"traders": await trading.list_traders(repo)}
