import math
import re
from datetime import datetime, timezone
from typing import Any, Optional

from fastapi import Request
from starlette.datastructures import UploadFile

from tradedesk.utils.logger import logger

# Longest leading decimal literal, e.g. "12.5abc" -> "12.5"
_LEADING_NUMBER = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def utc_timestamp():
    return datetime.now(timezone.utc).isoformat()


def parse_number(value: Any) -> Optional[float]:
    """
    Leniently read a number from a CSV cell or JSON value.

    Returns None when nothing numeric can be read or the result is not
    finite.
    """
    if isinstance(value, bool) or value is None:
        return None
    if isinstance(value, (int, float)):
        try:
            number = float(value)
        except OverflowError:
            return None
    elif isinstance(value, str):
        match = _LEADING_NUMBER.match(value)
        if not match:
            return None
        number = float(match.group(1))
    else:
        return None
    return number if math.isfinite(number) else None


def parse_calendar_date(value: Any) -> Optional[datetime]:
    """Parse an ISO date/datetime string into a naive UTC datetime."""
    if not isinstance(value, str):
        return None
    try:
        parsed = datetime.fromisoformat(value.strip())
    except ValueError:
        return None
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed


async def read_upload_text(request: Request, field: str = "file") -> Optional[str]:
    """
    Return the CSV text carried in a multipart/urlencoded form field.

    The field may hold an uploaded file or plain text; None when absent.
    """
    form = await request.form()
    file = form.get(field)

    if isinstance(file, UploadFile):
        content = await file.read()
        logger.info(f"Received upload '{file.filename}' ({len(content)} bytes)")
        return content.decode("utf-8-sig", errors="replace")
    if isinstance(file, str):
        return file
    return None
