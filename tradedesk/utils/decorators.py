# tradedesk/utils/decorators.py
from functools import wraps

from fastapi import HTTPException, status

from tradedesk.exceptions import EmptyCSVError, MissingInputError, TradeValidationError
from tradedesk.utils.logger import logger


def api_operation(action: str):
    """
    A decorator for route handlers that maps service errors to HTTP errors.

    Input problems become 400s; anything else (store failures included) is
    logged and returned as a 500 carrying the underlying message.
    """

    def decorator(func):
        @wraps(func)
        async def wrapper(*args, **kwargs):
            try:
                return await func(*args, **kwargs)
            except HTTPException:
                raise
            except (MissingInputError, EmptyCSVError) as e:
                logger.warning(f"Rejected request to {action}: {e}")
                raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
            except TradeValidationError as e:
                logger.warning(f"Rejected request to {action}: {e.errors}")
                raise HTTPException(
                    status_code=status.HTTP_400_BAD_REQUEST,
                    detail={"error": str(e), "errors": e.errors},
                )
            except Exception as e:
                logger.error(f"Failed to {action}: {e}", exc_info=True)
                raise HTTPException(
                    status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                    detail=f"Failed to {action}: {e}",
                )

        return wrapper

    return decorator
