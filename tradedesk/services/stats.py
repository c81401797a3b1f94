# tradedesk/services/stats.py
from typing import List

from tradedesk.models.trade_model import DashboardStats, MarketPrice, Trade


def distinct_instruments(trades: List[Trade]) -> List[str]:
    return list(dict.fromkeys(t.instrument for t in trades))


def distinct_traders(trades: List[Trade]) -> List[str]:
    return list(dict.fromkeys(t.trader for t in trades))


def compute_stats(trades: List[Trade], prices: List[MarketPrice]) -> DashboardStats:
    """Dashboard counters over the unfiltered collections."""
    total_volume = 0.0
    total_notional = 0.0
    for trade in trades:
        total_volume += trade.quantity
        total_notional += trade.quantity * trade.trade_price

    return DashboardStats(
        total_trades=len(trades),
        unique_instruments=len(distinct_instruments(trades)),
        unique_traders=len(distinct_traders(trades)),
        total_volume=total_volume,
        total_notional=total_notional,
        market_prices_count=len(prices),
    )
