"""GetTransactionCount query handler.

Returns the total number of ledger entries, cached under ``trx_count``.
Counting is not an external data read, so no access record is written.
"""

from src.application.dtos.transaction_dtos import COUNT_CODEC
from src.application.errors import ApplicationError, internal_server_error
from src.application.queries.transaction_queries import GetTransactionCount
from src.core.constants import TRANSACTION_COUNT_TTL_MINUTES
from src.core.result import Failure, Result, Success
from src.domain.protocols.cache_protocol import CacheProtocol
from src.domain.protocols.logger_protocol import LoggerProtocol
from src.domain.protocols.transaction_repository import (
    HistoricalTransactionRepository,
)
from src.infrastructure.cache.cache_keys import CacheKeys


class GetTransactionCountHandler:
    """Handler for GetTransactionCount query."""

    def __init__(
        self,
        transaction_repo: HistoricalTransactionRepository,
        cache: CacheProtocol,
        logger: LoggerProtocol,
        ttl_minutes: int = TRANSACTION_COUNT_TTL_MINUTES,
    ) -> None:
        self._transaction_repo = transaction_repo
        self._cache = cache
        self._logger = logger
        self._ttl_minutes = ttl_minutes

    async def handle(
        self, query: GetTransactionCount
    ) -> Result[int, ApplicationError]:
        key = CacheKeys.TRANSACTION_COUNT
        cached = await self._cache.get_as(key, COUNT_CODEC.validate_json)

        match cached:
            case Failure(error=err):
                self._logger.error("transaction count cache read failed", key=key)
                return Failure(error=internal_server_error(err))
            case Success(value=None):
                total = await self._transaction_repo.count()
                stored = await self._cache.set_as(
                    key,
                    total,
                    COUNT_CODEC.dump_json,
                    ttl_minutes=self._ttl_minutes,
                )
                if isinstance(stored, Failure):
                    self._logger.error("transaction count cache write failed", key=key)
                    return Failure(error=internal_server_error(stored.error))
                return Success(value=total)
            case Success(value=hit):
                return Success(value=hit)
            case _:
                # Unreachable but needed for type checker
                return Failure(error=internal_server_error())
