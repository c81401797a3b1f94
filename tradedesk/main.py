# tradedesk/main.py
from contextlib import asynccontextmanager

import uvicorn
from fastapi import Depends, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from tradedesk.config import settings
from tradedesk.database import init_db
from tradedesk.models.trade_model import OperationResult
from tradedesk.routers import analytics, market, trades
from tradedesk.services import trading
from tradedesk.services.repository import Repository
from tradedesk.utils.decorators import api_operation
from tradedesk.utils.dependencies import get_repository
from tradedesk.utils.helpers import utc_timestamp
from tradedesk.utils.logger import logger


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan event handler for startup and shutdown"""
    await init_db()
    logger.info(f"{settings.APP_NAME} started")
    yield
    logger.info("Application shutting down")


app = FastAPI(
    title=settings.APP_NAME,
    description="Trade capture and mark-to-market valuation",
    version="1.0.0",
    lifespan=lifespan,
)


app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


app.include_router(trades.router, prefix="/trades", tags=["Trades"])
app.include_router(market.router, prefix="/market-prices", tags=["Market Prices"])
app.include_router(analytics.router, tags=["Analytics"])


@app.get("/")
def root():
    return {"message": f"{settings.APP_NAME} running"}


@app.get("/health")
@api_operation("reach the database")
async def health(repo: Repository = Depends(get_repository)):
    await repo.ping()
    return {
        "success": True,
        "message": "Database connection healthy",
        "timestamp": utc_timestamp(),
    }


@app.delete("/all-data", response_model=OperationResult)
@api_operation("clear all data")
async def clear_all_data(repo: Repository = Depends(get_repository)):
    await trading.clear_all(repo)
    return OperationResult(message="All data cleared successfully")


if __name__ == "__main__":
    uvicorn.run(
        "tradedesk.main:app", host=settings.BACKEND_HOST, port=settings.BACKEND_PORT
    )
