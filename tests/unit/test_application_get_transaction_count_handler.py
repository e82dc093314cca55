"""Unit tests for GetTransactionCountHandler."""

from unittest.mock import MagicMock

import pytest

from src.application.queries.handlers.get_transaction_count_handler import (
    GetTransactionCountHandler,
)
from src.application.queries.transaction_queries import GetTransactionCount
from src.core.enums import ErrorCode
from src.core.result import Failure, Success
from src.infrastructure.cache.redis_adapter import RedisAdapter
from tests.utils.cache import assert_ttl_minutes, break_commands, read_text
from tests.utils.fakes import FakeTransactionRepository


def build_handler(redis, repo: FakeTransactionRepository):
    return GetTransactionCountHandler(
        transaction_repo=repo,
        cache=RedisAdapter(redis_client=redis, logger=MagicMock()),
        logger=MagicMock(),
    )


@pytest.mark.unit
class TestGetTransactionCount:
    async def test_counts_and_caches_for_five_minutes(self, redis, transactions):
        handler = build_handler(redis, FakeTransactionRepository(transactions))

        result = await handler.handle(GetTransactionCount())

        assert result == Success(value=12)
        assert await read_text(redis, "trx_count") == "12"
        await assert_ttl_minutes(redis, "trx_count", 5)

    async def test_cached_count_skips_repository(self, redis, transactions):
        repo = FakeTransactionRepository(transactions)
        handler = build_handler(redis, repo)
        await redis.set("trx_count", "40")

        result = await handler.handle(GetTransactionCount())

        assert result == Success(value=40)
        assert repo.count_calls == 0

    async def test_cached_zero_is_a_hit(self, redis):
        repo = FakeTransactionRepository([])
        handler = build_handler(redis, repo)
        await redis.set("trx_count", "0")

        result = await handler.handle(GetTransactionCount())

        assert result == Success(value=0)
        assert repo.count_calls == 0

    async def test_cache_failure_is_internal_error(self, redis, transactions):
        repo = FakeTransactionRepository(transactions)
        handler = build_handler(redis, repo)
        break_commands(redis, "get")

        result = await handler.handle(GetTransactionCount())

        assert isinstance(result, Failure)
        assert result.error.http_status == 500
        assert repo.count_calls == 0

    async def test_non_utf8_cached_count_is_internal_error(self, redis, transactions):
        repo = FakeTransactionRepository(transactions)
        logger = MagicMock()
        handler = GetTransactionCountHandler(
            transaction_repo=repo,
            cache=RedisAdapter(redis_client=redis, logger=MagicMock()),
            logger=logger,
        )
        await redis.set("trx_count", b"\xff\xfe")

        result = await handler.handle(GetTransactionCount())

        assert isinstance(result, Failure)
        assert result.error.http_status == 500
        assert result.error.domain_error.code == ErrorCode.CACHE_CORRUPTED
        assert repo.count_calls == 0
        logger.error.assert_called_once()
