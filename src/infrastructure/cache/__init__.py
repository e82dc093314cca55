"""Cache infrastructure package.

All cache dependencies are managed through src.core.container.

Architecture:
- RedisAdapter: Redis implementation of CacheProtocol
- CacheKeys: Key formats for transaction data
- Use src.core.container.get_cache() for dependency injection
"""

from src.infrastructure.cache.cache_keys import CacheKeys
from src.infrastructure.cache.redis_adapter import RedisAdapter

__all__ = [
    "CacheKeys",
    "RedisAdapter",
]
