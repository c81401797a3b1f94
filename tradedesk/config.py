# tradedesk/config.py
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    APP_NAME: str = "TradeDesk MtM"

    # mongo | memory
    STORE_BACKEND: str = "mongo"

    MONGO_URI: str = "mongodb://localhost:27017"
    MONGO_DB: str = "tradedesk"
    KV_COLLECTION: str = "kv_store"

    TRADES_KEY: str = "trades"
    MARKET_PRICES_KEY: str = "market_prices"

    DEFAULT_TRADER: str = "Unknown"
    DEFAULT_CURRENCY: str = "USD"
    DEFAULT_PAGE_SIZE: int = 50
    MAX_INVALID_ROWS_REPORTED: int = 10

    # Off keeps MtM = (close - trade_price) * quantity for both sides
    SIDE_AWARE_MTM: bool = False

    LOG_DIR: str = "logs"
    LOG_LEVEL: str = "INFO"

    BACKEND_HOST: str = "0.0.0.0"
    BACKEND_PORT: int = 8000

    class Config:
        env_file = ".env"


settings = Settings()
