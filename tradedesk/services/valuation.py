# tradedesk/services/valuation.py
from datetime import datetime
from typing import Dict, List, Optional, Tuple

from tradedesk.config import settings
from tradedesk.models.trade_model import (
    DailyPnL,
    InstrumentPnL,
    MarketPrice,
    PnLReport,
    Trade,
    TradeFilters,
    TradeSide,
    ValuedTrade,
)
from tradedesk.utils.helpers import parse_calendar_date


def filter_for_valuation(trades: List[Trade], filters: TradeFilters) -> List[Trade]:
    """
    Same lexical date bounds as the trade listing, but the instrument filter
    is an exact match here. The trader filter is ignored.
    """
    result = trades
    if filters.from_date:
        result = [t for t in result if t.trade_date >= filters.from_date]
    if filters.to_date:
        result = [t for t in result if t.trade_date <= filters.to_date]
    if filters.instrument:
        result = [t for t in result if t.instrument == filters.instrument]
    return result


def _date_rank(value: Optional[str]) -> Tuple[bool, datetime]:
    parsed = parse_calendar_date(value)
    # unparseable dates rank below every real date
    return (parsed is not None, parsed or datetime.min)


def latest_prices(prices: List[MarketPrice]) -> Dict[str, MarketPrice]:
    """
    Latest usable price per instrument, keyed by exact instrument name.

    On equal dates the price stored first wins. Prices without a close are
    skipped before dates are compared, so when the newest row for an
    instrument has no close an older dated price is used instead.
    """
    latest: Dict[str, MarketPrice] = {}
    for price in prices:
        if price.instrument is None or price.close_price is None:
            continue
        current = latest.get(price.instrument)
        if current is None or _date_rank(price.price_date) > _date_rank(
            current.price_date
        ):
            latest[price.instrument] = price
    return latest


def mark_to_market(trade: Trade, close_price: float, side_aware: bool = False) -> float:
    """
    (close - trade_price) * quantity.

    The side is ignored unless side_aware is set, in which case SELL trades
    take the opposite sign.
    """
    mtm = (close_price - trade.trade_price) * trade.quantity
    if side_aware and trade.side == TradeSide.SELL:
        mtm = -mtm
    return mtm


def _daily_sort_key(date: str):
    parsed = parse_calendar_date(date)
    return (parsed is None, parsed or datetime.min, date)


def compute_pnl(
    trades: List[Trade],
    prices: List[MarketPrice],
    side_aware: Optional[bool] = None,
) -> PnLReport:
    if side_aware is None:
        side_aware = settings.SIDE_AWARE_MTM

    latest = latest_prices(prices)
    total_pnl = 0.0
    daily: Dict[str, float] = {}
    by_instrument: Dict[str, InstrumentPnL] = {}
    valued = []

    for trade in trades:
        price = latest.get(trade.instrument)
        if price is None:
            continue

        mtm = mark_to_market(trade, price.close_price, side_aware)
        total_pnl += mtm
        daily[trade.trade_date] = daily.get(trade.trade_date, 0.0) + mtm

        bucket = by_instrument.setdefault(
            trade.instrument,
            InstrumentPnL(instrument=trade.instrument, mtm=0.0, count=0),
        )
        bucket.mtm += mtm
        bucket.count += 1

        valued.append(
            ValuedTrade(**trade.model_dump(), market_price=price.close_price, mtm=mtm)
        )

    daily_pnl = [
        DailyPnL(date=date, pnl=pnl)
        for date, pnl in sorted(daily.items(), key=lambda item: _daily_sort_key(item[0]))
    ]
    instrument_pnl = sorted(
        by_instrument.values(), key=lambda bucket: abs(bucket.mtm), reverse=True
    )

    return PnLReport(
        total_pnl=total_pnl,
        daily_pnl=daily_pnl,
        instrument_pnl=instrument_pnl,
        trade_count=len(trades),
        valued_trade_count=len(valued),
        trades=valued,
    )
