# tradedesk/services/trading.py
"""
Trade desk operations: ingestion, listing, valuation and housekeeping.

Each function takes a Repository and returns a response model. Row-level
validation failures are reported in the result; store failures propagate
as StoreError.
"""
from typing import Any, Dict, List, Optional

from tradedesk.config import settings
from tradedesk.exceptions import EmptyCSVError, MissingInputError, TradeValidationError
from tradedesk.models.trade_model import (
    DashboardStats,
    MarketPrice,
    MarketPriceList,
    PnLReport,
    PriceUploadResult,
    TradeCreated,
    TradeFilters,
    TradePage,
    TradeUploadResult,
)
from tradedesk.services.csv_parser import parse_csv
from tradedesk.services.query import query_trades
from tradedesk.services.repository import Repository
from tradedesk.services.stats import compute_stats, distinct_instruments, distinct_traders
from tradedesk.services.validation import normalize_trade, partition_rows, validate_trade
from tradedesk.services.valuation import compute_pnl, filter_for_valuation
from tradedesk.utils.helpers import parse_number
from tradedesk.utils.logger import logger


def _rows_from_csv(csv_text: Optional[str]) -> List[Dict[str, Any]]:
    if csv_text is None:
        raise MissingInputError()
    rows = parse_csv(csv_text)
    if not rows:
        raise EmptyCSVError()
    return rows


async def upload_trades(repo: Repository, csv_text: Optional[str]) -> TradeUploadResult:
    rows = _rows_from_csv(csv_text)
    valid, invalid = partition_rows(rows)

    if valid:
        stored = await repo.append_trades(valid)
        logger.info(f"Appended {len(valid)} trades, collection size now {stored}")
    if invalid:
        logger.warning(f"Rejected {len(invalid)} of {len(rows)} uploaded trade rows")

    return TradeUploadResult(
        message=f"Uploaded {len(valid)} trades successfully",
        valid_count=len(valid),
        invalid_count=len(invalid),
        invalid_trades=invalid[: settings.MAX_INVALID_ROWS_REPORTED],
    )


async def create_trade(repo: Repository, record: Dict[str, Any]) -> TradeCreated:
    result = validate_trade(record)
    if not result.valid:
        raise TradeValidationError(result.errors)

    trade = normalize_trade(record)
    await repo.append_trades([trade])
    logger.info(f"Created trade {trade.trade_id} ({trade.side} {trade.instrument})")
    return TradeCreated(trade=trade)


async def list_trades(
    repo: Repository,
    filters: TradeFilters,
    page: int = 1,
    limit: int = settings.DEFAULT_PAGE_SIZE,
) -> TradePage:
    trades = await repo.load_trades()
    return query_trades(trades, filters, page, limit)


async def upload_market_prices(
    repo: Repository, csv_text: Optional[str]
) -> PriceUploadResult:
    rows = _rows_from_csv(csv_text)

    # No validation here: whatever was parsed replaces the whole collection
    prices = [
        MarketPrice(
            instrument=row.get("instrument"),
            price_date=row.get("price_date"),
            close_price=parse_number(row.get("close_price")),
        )
        for row in rows
    ]
    await repo.replace_prices(prices)
    logger.info(f"Replaced market prices with {len(prices)} rows")

    return PriceUploadResult(
        message=f"Uploaded {len(prices)} market prices successfully",
        count=len(prices),
    )


async def list_market_prices(repo: Repository) -> MarketPriceList:
    return MarketPriceList(prices=await repo.load_prices())


async def pnl_report(repo: Repository, filters: TradeFilters) -> PnLReport:
    trades = filter_for_valuation(await repo.load_trades(), filters)
    prices = await repo.load_prices()
    return compute_pnl(trades, prices)


async def dashboard_stats(repo: Repository) -> DashboardStats:
    return compute_stats(await repo.load_trades(), await repo.load_prices())


async def list_instruments(repo: Repository) -> List[str]:
    return distinct_instruments(await repo.load_trades())


async def list_traders(repo: Repository) -> List[str]:
    return distinct_traders(await repo.load_trades())


async def clear_trades(repo: Repository):
    await repo.clear_trades()
    logger.info("All trades cleared")


async def clear_market_prices(repo: Repository):
    await repo.clear_prices()
    logger.info("All market prices cleared")


async def clear_all(repo: Repository):
    await repo.clear_trades()
    await repo.clear_prices()
    logger.info("All trades and market prices cleared")
