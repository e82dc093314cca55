"""Unit tests for GetTransactionHandler.

Tests cover:
- Cache miss reads the repository and caches the entry (30 minutes)
- Cache hit skips the repository
- Not found: 404, nothing cached, nothing audited
- Access record endpoint carries the transaction id
- Cache and audit failures
"""

from unittest.mock import MagicMock

import pytest

from src.application.errors import ApplicationErrorCode
from src.application.queries.handlers.get_transaction_handler import (
    GetTransactionHandler,
)
from src.application.queries.transaction_queries import GetTransactionById
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.cache.redis_adapter import RedisAdapter
from tests.utils.cache import assert_ttl_minutes, break_commands
from tests.utils.fakes import (
    FakeAccessLogRepository,
    FakeTransactionRepository,
)


@pytest.fixture
def access_log_repo() -> FakeAccessLogRepository:
    return FakeAccessLogRepository()


@pytest.fixture
def transaction_repo(transactions) -> FakeTransactionRepository:
    return FakeTransactionRepository(transactions)


@pytest.fixture
def handler(redis, transaction_repo, access_log_repo) -> GetTransactionHandler:
    return GetTransactionHandler(
        transaction_repo=transaction_repo,
        cache=RedisAdapter(redis_client=redis, logger=MagicMock()),
        access_log_repo=access_log_repo,
        logger=MagicMock(),
    )


def query_for(caller, transaction_id: str) -> GetTransactionById:
    return GetTransactionById(
        id=transaction_id, caller=caller, transaction_id=transaction_id
    )


@pytest.mark.unit
class TestGetTransactionFound:
    async def test_returns_full_entry(self, handler, caller, transactions):
        result = await handler.handle(query_for(caller, "trx-0003"))

        assert isinstance(result, Success)
        assert result.value == transactions[2]

    async def test_caches_entry_for_thirty_minutes(self, handler, caller, redis):
        await handler.handle(query_for(caller, "trx-0003"))

        assert await redis.exists("trx:trx-0003") == 1
        await assert_ttl_minutes(redis, "trx:trx-0003", 30)

    async def test_cache_hit_skips_repository(
        self, handler, caller, transaction_repo, transactions
    ):
        await handler.handle(query_for(caller, "trx-0003"))
        result = await handler.handle(query_for(caller, "trx-0003"))

        assert isinstance(result, Success)
        # Decoded from JSON, equal to the original entity
        assert result.value == transactions[2]
        assert transaction_repo.find_calls == ["trx-0003"]

    async def test_records_access_with_transaction_path(
        self, handler, caller, access_log_repo
    ):
        await handler.handle(query_for(caller, "trx-0003"))

        assert len(access_log_repo.records) == 1
        record = access_log_repo.records[0]
        assert record.endpoint == "/api/transactions/trx-0003"
        assert record.response_status == 200


@pytest.mark.unit
class TestGetTransactionNotFound:
    async def test_missing_entry_is_not_found(
        self, handler, caller, redis, access_log_repo
    ):
        result = await handler.handle(query_for(caller, "trx-missing"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.NOT_FOUND
        assert result.error.http_status == 404
        assert result.error.message == "Transaction with id trx-missing not found"
        assert result.error.domain_error.code == ErrorCode.TRANSACTION_NOT_FOUND

        # Neither cached nor audited
        assert await redis.dbsize() == 0
        assert access_log_repo.records == []

    async def test_not_found_is_not_cached(self, handler, caller, transaction_repo):
        await handler.handle(query_for(caller, "trx-missing"))
        await handler.handle(query_for(caller, "trx-missing"))

        assert transaction_repo.find_calls == ["trx-missing", "trx-missing"]


@pytest.mark.unit
class TestGetTransactionFailures:
    async def test_cache_read_failure_is_internal_error(
        self, handler, caller, redis, transaction_repo
    ):
        break_commands(redis, "get")

        result = await handler.handle(query_for(caller, "trx-0003"))

        assert isinstance(result, Failure)
        assert result.error.http_status == 500
        assert transaction_repo.find_calls == []

    async def test_cache_write_failure_is_internal_error(
        self, handler, caller, redis, access_log_repo
    ):
        break_commands(redis, "setex")

        result = await handler.handle(query_for(caller, "trx-0003"))

        assert isinstance(result, Failure)
        assert result.error.http_status == 500
        assert access_log_repo.records == []

    async def test_audit_failure_is_internal_error(
        self, caller, redis, transaction_repo
    ):
        handler = GetTransactionHandler(
            transaction_repo=transaction_repo,
            cache=RedisAdapter(redis_client=redis, logger=MagicMock()),
            access_log_repo=FakeAccessLogRepository(fail=True),
            logger=MagicMock(),
        )

        result = await handler.handle(query_for(caller, "trx-0003"))

        assert isinstance(result, Failure)
        assert result.error.code == ApplicationErrorCode.INTERNAL_SERVER
