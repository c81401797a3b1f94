# tradedesk/models/trade_model.py
from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field


class TradeSide(str, Enum):
    BUY = "BUY"
    SELL = "SELL"


class Trade(BaseModel):
    """A validated, normalized trade as stored in the trade collection."""

    trade_id: str
    trade_date: str  # YYYY-MM-DD, compared lexically
    trader: str
    instrument: str
    side: TradeSide
    quantity: float
    trade_price: float
    currency: str

    class Config:
        use_enum_values = True


class ValuedTrade(Trade):
    market_price: float
    mtm: float


class MarketPrice(BaseModel):
    # Price rows are stored exactly as parsed, so every field may be missing
    instrument: Optional[str] = None
    price_date: Optional[str] = None
    close_price: Optional[float] = None


class TradeFilters(BaseModel):
    from_date: Optional[str] = None
    to_date: Optional[str] = None
    instrument: Optional[str] = None
    trader: Optional[str] = None


class ApiModel(BaseModel):
    """Response model serialized with camelCase aliases."""

    class Config:
        populate_by_name = True


class InvalidRow(BaseModel):
    row: Dict[str, Any]
    errors: List[str]


class TradeUploadResult(ApiModel):
    success: bool = True
    message: str
    valid_count: int = Field(..., alias="validCount")
    invalid_count: int = Field(..., alias="invalidCount")
    invalid_trades: List[InvalidRow] = Field(default_factory=list, alias="invalidTrades")


class TradeCreated(ApiModel):
    success: bool = True
    trade: Trade


class Pagination(ApiModel):
    page: int
    limit: int
    total: int
    total_pages: int = Field(..., alias="totalPages")


class TradePage(ApiModel):
    trades: List[Trade]
    pagination: Pagination


class PriceUploadResult(ApiModel):
    success: bool = True
    message: str
    count: int


class MarketPriceList(ApiModel):
    prices: List[MarketPrice]


class DailyPnL(ApiModel):
    date: str
    pnl: float


class InstrumentPnL(ApiModel):
    instrument: str
    mtm: float
    count: int


class PnLReport(ApiModel):
    total_pnl: float = Field(..., alias="totalPnL")
    daily_pnl: List[DailyPnL] = Field(default_factory=list, alias="dailyPnL")
    instrument_pnl: List[InstrumentPnL] = Field(
        default_factory=list, alias="instrumentPnL"
    )
    trade_count: int = Field(..., alias="tradeCount")
    valued_trade_count: int = Field(..., alias="valuedTradeCount")
    trades: List[ValuedTrade] = Field(default_factory=list)


class DashboardStats(ApiModel):
    total_trades: int = Field(..., alias="totalTrades")
    unique_instruments: int = Field(..., alias="uniqueInstruments")
    unique_traders: int = Field(..., alias="uniqueTraders")
    total_volume: float = Field(..., alias="totalVolume")
    total_notional: float = Field(..., alias="totalNotional")
    market_prices_count: int = Field(..., alias="marketPricesCount")


class OperationResult(BaseModel):
    success: bool = True
    message: str
