# tradedesk/services/query.py
import math
import re
from functools import cmp_to_key
from typing import List, Optional

from tradedesk.models.trade_model import Pagination, Trade, TradeFilters, TradePage

_NON_DIGITS = re.compile(r"[^0-9]")


def filter_trades(trades: List[Trade], filters: TradeFilters) -> List[Trade]:
    """Lexical date bounds, case-insensitive substring on instrument and trader."""
    result = trades
    if filters.from_date:
        result = [t for t in result if t.trade_date >= filters.from_date]
    if filters.to_date:
        result = [t for t in result if t.trade_date <= filters.to_date]
    if filters.instrument:
        needle = filters.instrument.lower()
        result = [t for t in result if needle in t.instrument.lower()]
    if filters.trader:
        needle = filters.trader.lower()
        result = [t for t in result if needle in t.trader.lower()]
    return result


def trade_id_number(trade_id: str) -> Optional[int]:
    """Integer formed by the digits of a trade id ("T-0012" -> 12), if any."""
    digits = _NON_DIGITS.sub("", trade_id)
    return int(digits) if digits else None


def compare_trade_ids(a: Trade, b: Trade) -> int:
    # Decided per pair: numeric when both ids carry digits, else plain string order
    a_num = trade_id_number(a.trade_id)
    b_num = trade_id_number(b.trade_id)
    if a_num is not None and b_num is not None:
        return (a_num > b_num) - (a_num < b_num)
    return (a.trade_id > b.trade_id) - (a.trade_id < b.trade_id)


def sort_trades(trades: List[Trade]) -> List[Trade]:
    return sorted(trades, key=cmp_to_key(compare_trade_ids))


def paginate(trades: List[Trade], page: int, limit: int) -> TradePage:
    if page < 1 or limit < 1:
        raise ValueError("page and limit must be positive")

    total = len(trades)
    start = (page - 1) * limit
    return TradePage(
        trades=trades[start : start + limit],
        pagination=Pagination(
            page=page,
            limit=limit,
            total=total,
            total_pages=math.ceil(total / limit),
        ),
    )


def query_trades(
    trades: List[Trade], filters: TradeFilters, page: int, limit: int
) -> TradePage:
    return paginate(sort_trades(filter_trades(trades, filters)), page, limit)
