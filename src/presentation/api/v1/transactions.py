"""Transaction history resource router.

Read-only endpoints over the ledger for external services.

Endpoints:
    GET /api/transaction/histories        - Page of transaction summaries
    GET /api/transaction/histories/{id}   - Single transaction

Callers identify themselves through X-Consumer-Custom-ID, X-Forwarded-For,
User-Agent and an API key; all four are recorded in the access log.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Header, Path, Query
from fastapi.responses import JSONResponse

from src.application.dtos.transaction_dtos import CallerContext
from src.application.queries.handlers.get_transaction_count_handler import (
    GetTransactionCountHandler,
)
from src.application.queries.handlers.get_transaction_handler import (
    GetTransactionHandler,
)
from src.application.queries.handlers.list_transactions_handler import (
    ListTransactionsHandler,
)
from src.application.queries.transaction_queries import (
    GetTransactionById,
    GetTransactionCount,
    GetTransactions,
)
from src.core.constants import DEFAULT_PAGE, DEFAULT_PAGE_SIZE
from src.core.container import (
    get_get_transaction_count_handler,
    get_get_transaction_handler,
    get_list_transactions_handler,
    get_logger,
)
from src.core.result import Failure
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.presentation.api.middleware.trace_middleware import get_trace_id
from src.presentation.api.v1.errors import ErrorResponseBuilder
from src.schemas.common_schemas import ErrorResponse, MetaResponse, PaginatedMetaResponse
from src.schemas.transaction_schemas import (
    TransactionDetailResponse,
    TransactionListResponse,
    TransactionResponse,
    TransactionSummaryResponse,
)

router = APIRouter(prefix="/transaction", tags=["Transactions"])

_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"description": "Missing or invalid parameters", "model": ErrorResponse},
    500: {"description": "Internal server error", "model": ErrorResponse},
}


@router.get(
    "/histories",
    response_model=TransactionListResponse,
    responses=_ERROR_RESPONSES,
    summary="List transactions",
    description="Newest-first page of transaction summaries with the total count.",
)
async def list_transactions(
    external_service_id: Annotated[str, Header(alias="X-Consumer-Custom-ID")],
    ip_address: Annotated[str, Header(alias="X-Forwarded-For")],
    user_agent: Annotated[str, Header(alias="User-Agent")],
    api_key: Annotated[str, Header(alias="X-API-Key")],
    page: Annotated[int, Query(description="1-based page number")] = DEFAULT_PAGE,
    size: Annotated[int, Query(description="Items per page")] = DEFAULT_PAGE_SIZE,
    list_handler: ListTransactionsHandler = Depends(get_list_transactions_handler),
    count_handler: GetTransactionCountHandler = Depends(
        get_get_transaction_count_handler
    ),
    logger: LoggerProtocol = Depends(get_logger),
) -> TransactionListResponse | JSONResponse:
    """List transactions.

    GET /api/transaction/histories?page=1&size=10 → 200 OK

    The page is fetched first (validating page and size), then the total
    count.
    """
    logger.info(
        "getting transactions for external service",
        external_service_id=external_service_id,
        ip_address=ip_address,
        page=page,
        size=size,
        trace_id=get_trace_id(),
    )

    caller = CallerContext(
        external_service_id=external_service_id,
        api_key_id=api_key,
        ip_address=ip_address,
        user_agent=user_agent,
    )
    result = await list_handler.handle(
        GetTransactions(caller=caller, page=page, size=size)
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(result.error)

    count_result = await count_handler.handle(GetTransactionCount())
    if isinstance(count_result, Failure):
        return ErrorResponseBuilder.from_application_error(count_result.error)

    return TransactionListResponse(
        meta=PaginatedMetaResponse(
            code="200",
            message="transactions retrieved successfully",
            total=count_result.value,
            page=page,
            size=size,
        ),
        data=[TransactionSummaryResponse.from_dto(item) for item in result.value],
    )


@router.get(
    "/histories/{transaction_id}",
    response_model=TransactionResponse,
    responses={
        **_ERROR_RESPONSES,
        404: {"description": "Transaction not found", "model": ErrorResponse},
    },
    summary="Get transaction",
    description="Single ledger entry. The API key is passed as a query parameter.",
)
async def get_transaction(
    transaction_id: Annotated[str, Path(description="Transaction id")],
    external_service_id: Annotated[str, Header(alias="X-Consumer-Custom-ID")],
    ip_address: Annotated[str, Header(alias="X-Forwarded-For")],
    user_agent: Annotated[str, Header(alias="User-Agent")],
    api_key: Annotated[str, Query(alias="X-API-Key")],
    handler: GetTransactionHandler = Depends(get_get_transaction_handler),
    logger: LoggerProtocol = Depends(get_logger),
) -> TransactionResponse | JSONResponse:
    """Get a transaction.

    GET /api/transaction/histories/{id}?X-API-Key=... → 200 OK
    """
    logger.info(
        "getting transaction for external service",
        external_service_id=external_service_id,
        ip_address=ip_address,
        transaction_id=transaction_id,
        trace_id=get_trace_id(),
    )

    caller = CallerContext(
        external_service_id=external_service_id,
        api_key_id=api_key,
        ip_address=ip_address,
        user_agent=user_agent,
    )
    result = await handler.handle(
        GetTransactionById(
            id=transaction_id, caller=caller, transaction_id=transaction_id
        )
    )
    if isinstance(result, Failure):
        return ErrorResponseBuilder.from_application_error(result.error)

    return TransactionResponse(
        meta=MetaResponse(code="200", message="transaction retrieved successfully"),
        data=TransactionDetailResponse.from_entity(result.value),
    )
