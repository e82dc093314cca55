"""fakeredis helpers for tests that drive the real RedisAdapter.

``make_redis`` gives every test its own in-memory server. Tests seed and
inspect it with the regular redis commands (``set``, ``get``, ``ttl``) and
break individual commands with ``break_commands``.
"""

from unittest.mock import AsyncMock, MagicMock

import fakeredis
import fakeredis.aioredis
from redis.exceptions import ConnectionError as RedisConnectionError


def make_redis(
    server: fakeredis.FakeServer | None = None,
) -> fakeredis.aioredis.FakeRedis:
    """Async fake client on ``server`` (a fresh one when omitted)."""
    return fakeredis.aioredis.FakeRedis(server=server or fakeredis.FakeServer())


def break_commands(client: fakeredis.aioredis.FakeRedis, *commands: str) -> None:
    """Make each named client method raise a Redis connection error."""
    for command in commands:
        error = RedisConnectionError(f"{command}: connection refused")
        # scan_iter returns an async iterator rather than a coroutine
        mock = MagicMock if command == "scan_iter" else AsyncMock
        setattr(client, command, mock(side_effect=error))


async def read_text(client: fakeredis.aioredis.FakeRedis, key: str) -> str | None:
    raw = await client.get(key)
    return raw.decode("utf-8") if raw is not None else None


async def assert_ttl_minutes(
    client: fakeredis.aioredis.FakeRedis, key: str, minutes: int
) -> None:
    """The key expires in ``minutes`` (to the second)."""
    remaining = await client.ttl(key)
    assert minutes * 60 - 2 <= remaining <= minutes * 60
