"""API routers.

Resources:
    /api/transaction/histories        - Transaction history listing
    /api/transaction/histories/{id}   - Single transaction

The paths are unversioned on the wire because existing consumers call them
directly.
"""

from fastapi import APIRouter

from src.presentation.api.v1.transactions import router as transactions_router

api_router = APIRouter(prefix="/api")

api_router.include_router(transactions_router)

__all__ = [
    "api_router",
    "transactions_router",
]
