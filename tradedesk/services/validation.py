# tradedesk/services/validation.py
from typing import Any, Dict, List, NamedTuple, Tuple

from tradedesk.config import settings
from tradedesk.models.trade_model import InvalidRow, Trade, TradeSide
from tradedesk.utils.helpers import parse_number

SIDES = {side.value for side in TradeSide}


class ValidationResult(NamedTuple):
    valid: bool
    errors: List[str]


def validate_trade(row: Dict[str, Any]) -> ValidationResult:
    """
    Check a raw trade row. Every rule is evaluated, so one row can report
    several errors at once. trade_date is only checked for presence.
    """
    errors = []

    if not row.get("trade_id"):
        errors.append("trade_id is required")
    if not row.get("trade_date"):
        errors.append("trade_date is required")
    if not row.get("instrument"):
        errors.append("instrument is required")

    side = row.get("side")
    if not side or not isinstance(side, str) or side.upper() not in SIDES:
        errors.append("side must be BUY or SELL")

    if not row.get("quantity") or parse_number(row["quantity"]) is None:
        errors.append("quantity must be a valid number")
    if not row.get("trade_price") or parse_number(row["trade_price"]) is None:
        errors.append("trade_price must be a valid number")

    return ValidationResult(valid=not errors, errors=errors)


def normalize_trade(row: Dict[str, Any]) -> Trade:
    """Build a stored Trade from a row that already passed validate_trade."""
    return Trade(
        trade_id=str(row["trade_id"]),
        trade_date=str(row["trade_date"]),
        trader=str(row.get("trader") or settings.DEFAULT_TRADER),
        instrument=str(row["instrument"]),
        side=row["side"].upper(),
        quantity=parse_number(row["quantity"]),
        trade_price=parse_number(row["trade_price"]),
        currency=str(row.get("currency") or settings.DEFAULT_CURRENCY),
    )


def partition_rows(
    rows: List[Dict[str, Any]],
) -> Tuple[List[Trade], List[InvalidRow]]:
    """Split rows into normalized trades and rejected rows with their errors."""
    valid, invalid = [], []
    for row in rows:
        result = validate_trade(row)
        if result.valid:
            valid.append(normalize_trade(row))
        else:
            invalid.append(InvalidRow(row=row, errors=result.errors))
    return valid, invalid
