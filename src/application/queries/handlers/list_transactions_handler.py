"""ListTransactions query handler.

Serves one page of transaction summaries with a cache-aside read and records
every successful access in the API access log.

Flow:
    1. Validate page and size (before any I/O)
    2. Try cache ``trx_list:{page}:{size}``
    3. On miss, stream from the repository, project and cache the page
    4. Write the access record (cache hit or miss)

Pagination:
    The repository window is ``limit = page * size`` and
    ``offset = (page - 1) * size``. Consumers of the shared cache rely on
    this exact window, so it is kept as is.
"""

from src.application.dtos.transaction_dtos import (
    TRANSACTION_LIST_CODEC,
    TransactionResp,
)
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    internal_server_error,
)
from src.application.queries.transaction_queries import GetTransactions
from src.core.constants import (
    TRANSACTION_LIST_TTL_MINUTES,
    TRANSACTIONS_AUDIT_ENDPOINT,
)
from src.core.enums import ErrorCode
from src.core.errors import ValidationError
from src.core.result import Failure, Result, Success
from src.domain.entities.api_access_log import ApiAccessLog
from src.domain.enums.http_method import HttpMethod
from src.domain.protocols.api_access_log_repository import ApiAccessLogRepository
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.transaction_repository import (
    HistoricalTransactionRepository,
)
from src.infrastructure.cache.cache_keys import CacheKeys

INVALID_PAGINATION_MESSAGE = "Page and size must be greater than 0"


def pagination_window(page: int, size: int) -> tuple[int, int]:
    """Return the (limit, offset) pair used for a page."""
    return page * size, (page - 1) * size


class ListTransactionsHandler:
    """Handler for GetTransactions query.

    Dependencies (injected via constructor):
        - HistoricalTransactionRepository: Ledger reads on cache miss
        - CacheProtocol: Page cache
        - ApiAccessLogRepository: Access audit writer
        - LoggerProtocol: Structured logging
    """

    def __init__(
        self,
        transaction_repo: HistoricalTransactionRepository,
        cache: CacheProtocol,
        access_log_repo: ApiAccessLogRepository,
        logger: LoggerProtocol,
        ttl_minutes: int = TRANSACTION_LIST_TTL_MINUTES,
    ) -> None:
        self._transaction_repo = transaction_repo
        self._cache = cache
        self._access_log_repo = access_log_repo
        self._logger = logger
        self._ttl_minutes = ttl_minutes

    async def handle(
        self, query: GetTransactions
    ) -> Result[list[TransactionResp], ApplicationError]:
        """Handle GetTransactions query.

        Args:
            query: Page request with caller context.

        Returns:
            Success(list[TransactionResp]): The requested page.
            Failure(ApplicationError): INVALID_PARAMETER for a non-positive
                page or size, INTERNAL_SERVER when the cache or the access
                log fails.
        """
        if query.page <= 0 or query.size <= 0:
            return Failure(
                error=ApplicationError(
                    code=ApplicationErrorCode.INVALID_PARAMETER,
                    message=INVALID_PAGINATION_MESSAGE,
                    domain_error=ValidationError(
                        code=ErrorCode.INVALID_PAGINATION,
                        message=INVALID_PAGINATION_MESSAGE,
                        field="page" if query.page <= 0 else "size",
                    ),
                )
            )

        key = CacheKeys.transaction_list(query.page, query.size)
        cached = await self._cache.get_as(key, TRANSACTION_LIST_CODEC.validate_json)

        match cached:
            case Failure(error=err):
                self._logger.error("transaction list cache read failed", key=key)
                return Failure(error=internal_server_error(err))
            case Success(value=None):
                self._logger.debug("transaction list cache miss", key=key)
                loaded = await self._load_page(key, query.page, query.size)
                if isinstance(loaded, Failure):
                    return loaded
                transactions = loaded.value
            case Success(value=hit):
                self._logger.debug("transaction list cache hit", key=key)
                transactions = hit

        audited = await self._access_log_repo.insert(
            ApiAccessLog(
                external_service_id=query.caller.external_service_id,
                api_key_id=query.caller.api_key_id,
                endpoint=TRANSACTIONS_AUDIT_ENDPOINT,
                http_method=HttpMethod.GET,
                ip_address=query.caller.ip_address,
                user_agent=query.caller.user_agent,
                response_status=200,
            )
        )
        if isinstance(audited, Failure):
            self._logger.error(
                "api access log write failed",
                endpoint=TRANSACTIONS_AUDIT_ENDPOINT,
                reason=audited.error.message,
            )
            return Failure(error=internal_server_error(audited.error))
        self._logger.info(
            "api access recorded",
            endpoint=TRANSACTIONS_AUDIT_ENDPOINT,
            external_service_id=query.caller.external_service_id,
        )

        return Success(value=transactions)

    async def _load_page(
        self, key: str, page: int, size: int
    ) -> Result[list[TransactionResp], ApplicationError]:
        """Read a page from the ledger and populate the cache."""
        limit, offset = pagination_window(page, size)
        transactions = [
            TransactionResp.from_entity(transaction)
            async for transaction in self._transaction_repo.list_recent(
                limit=limit, offset=offset
            )
        ]

        stored = await self._cache.set_as(
            key,
            transactions,
            TRANSACTION_LIST_CODEC.dump_json,
            ttl_minutes=self._ttl_minutes,
        )
        if isinstance(stored, Failure):
            self._logger.error("transaction list cache write failed", key=key)
            return Failure(error=internal_server_error(stored.error))

        return Success(value=transactions)
