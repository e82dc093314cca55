"""GetTransaction query handler.

Handles requests to retrieve a single ledger entry with a cache-aside read.
Successful reads are recorded in the API access log; not-found answers are
neither cached nor audited.
"""

from src.application.dtos.transaction_dtos import TRANSACTION_CODEC
from src.application.errors import (
    ApplicationError,
    ApplicationErrorCode,
    internal_server_error,
)
from src.application.queries.transaction_queries import GetTransactionById
from src.core.constants import (
    TRANSACTION_SINGLE_TTL_MINUTES,
    TRANSACTIONS_AUDIT_ENDPOINT,
)
from src.core.enums import ErrorCode
from src.core.errors import NotFoundError
from src.core.result import Failure, Result, Success
from src.domain.entities.api_access_log import ApiAccessLog
from src.domain.entities.historical_transaction import HistoricalTransaction
from src.domain.enums.http_method import HttpMethod
from src.domain.protocols.api_access_log_repository import ApiAccessLogRepository
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.transaction_repository import (
    HistoricalTransactionRepository,
)
from src.infrastructure.cache.cache_keys import CacheKeys


class GetTransactionHandler:
    """Handler for GetTransactionById query.

    Uses cache-first strategy:
    1. Try cache ``trx:{id}``
    2. Fall back to the repository on miss
    3. Populate cache on miss (only when found)
    4. Record the access
    """

    def __init__(
        self,
        transaction_repo: HistoricalTransactionRepository,
        cache: CacheProtocol,
        access_log_repo: ApiAccessLogRepository,
        logger: LoggerProtocol,
        ttl_minutes: int = TRANSACTION_SINGLE_TTL_MINUTES,
    ) -> None:
        self._transaction_repo = transaction_repo
        self._cache = cache
        self._access_log_repo = access_log_repo
        self._logger = logger
        self._ttl_minutes = ttl_minutes

    async def handle(
        self, query: GetTransactionById
    ) -> Result[HistoricalTransaction, ApplicationError]:
        """Handle GetTransactionById query.

        Returns:
            Success(HistoricalTransaction): Entry found.
            Failure(ApplicationError): NOT_FOUND when no row matches,
                INTERNAL_SERVER when the cache or the access log fails.
        """
        key = CacheKeys.transaction(query.id)
        cached = await self._cache.get_as(key, TRANSACTION_CODEC.validate_json)

        match cached:
            case Failure(error=err):
                self._logger.error("transaction cache read failed", key=key)
                return Failure(error=internal_server_error(err))
            case Success(value=None):
                self._logger.debug("transaction cache miss", key=key)
                transaction = await self._transaction_repo.find_by_id(query.id)
                if transaction is None:
                    message = f"Transaction with id {query.id} not found"
                    return Failure(
                        error=ApplicationError(
                            code=ApplicationErrorCode.NOT_FOUND,
                            message=message,
                            domain_error=NotFoundError(
                                code=ErrorCode.TRANSACTION_NOT_FOUND,
                                message=message,
                                resource_type="HistoricalTransaction",
                                resource_id=query.id,
                            ),
                        )
                    )

                stored = await self._cache.set_as(
                    key,
                    transaction,
                    TRANSACTION_CODEC.dump_json,
                    ttl_minutes=self._ttl_minutes,
                )
                if isinstance(stored, Failure):
                    self._logger.error("transaction cache write failed", key=key)
                    return Failure(error=internal_server_error(stored.error))
            case Success(value=hit):
                self._logger.debug("transaction cache hit", key=key)
                transaction = hit

        endpoint = f"{TRANSACTIONS_AUDIT_ENDPOINT}/{query.transaction_id}"
        audited = await self._access_log_repo.insert(
            ApiAccessLog(
                external_service_id=query.caller.external_service_id,
                api_key_id=query.caller.api_key_id,
                endpoint=endpoint,
                http_method=HttpMethod.GET,
                ip_address=query.caller.ip_address,
                user_agent=query.caller.user_agent,
                response_status=200,
            )
        )
        if isinstance(audited, Failure):
            self._logger.error(
                "api access log write failed",
                endpoint=endpoint,
                reason=audited.error.message,
            )
            return Failure(error=internal_server_error(audited.error))
        self._logger.info(
            "api access recorded",
            endpoint=endpoint,
            external_service_id=query.caller.external_service_id,
        )

        return Success(value=transaction)
