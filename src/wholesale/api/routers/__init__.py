"""API routers package."""

from wholesale.api.routers.accounts import router as accounts_router
from wholesale.api.routers.transactions import (
    router as transactions_router,
    legacy_router as legacy_transactions_router,
)

__all__ = [
    "accounts_router",
    "transactions_router",
    "legacy_transactions_router",
]
