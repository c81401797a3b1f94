from fastapi import APIRouter, Depends, Request

from tradedesk.models.trade_model import (
    MarketPriceList,
    OperationResult,
    PriceUploadResult,
)
from tradedesk.services import trading
from tradedesk.services.repository import Repository
from tradedesk.utils.decorators import api_operation
from tradedesk.utils.dependencies import get_repository
from tradedesk.utils.helpers import read_upload_text


router = APIRouter()


@router.post("/upload", response_model=PriceUploadResult)
@api_operation("upload market prices")
async def upload_market_prices(
    request: Request, repo: Repository = Depends(get_repository)
):
    """
    Replace the stored market prices with the uploaded CSV
    (instrument, price_date, close_price). Rows are not validated.
    """
    csv_text = await read_upload_text(request)
    return await trading.upload_market_prices(repo, csv_text)


@router.get("", response_model=MarketPriceList)
@api_operation("fetch market prices")
async def list_market_prices(repo: Repository = Depends(get_repository)):
    return await trading.list_market_prices(repo)


@router.delete("", response_model=OperationResult)
@api_operation("clear market prices")
async def clear_market_prices(repo: Repository = Depends(get_repository)):
    await trading.clear_market_prices(repo)
    return OperationResult(message="All market prices cleared")
