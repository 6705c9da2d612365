"""
Redis cache for read-heavy API payloads (the wizard reference data).

Every operation degrades to a miss/no-op when Redis is disabled or down,
so callers never need to handle cache errors.
"""

import json
import logging
from decimal import Decimal
from typing import Any, Callable, Optional

import redis
from redis.exceptions import RedisError
from flask import Flask, current_app

logger = logging.getLogger(__name__)


def _encode(value: Any) -> str:
    """JSON with Decimals kept as tagged strings so they survive a round trip."""
    def fallback(obj: Any) -> Any:
        if isinstance(obj, Decimal):
            return {"__decimal__": str(obj)}
        if hasattr(obj, 'isoformat'):
            return obj.isoformat()
        raise TypeError(f"Cannot cache value of type {type(obj).__name__}")
    return json.dumps(value, default=fallback)


def _decode(raw: str) -> Any:
    return json.loads(
        raw,
        object_hook=lambda d: Decimal(d["__decimal__"]) if "__decimal__" in d else d,
    )


class CacheService:
    """
    Thin cache-aside layer over Redis.

    Keys: {CACHE_KEY_PREFIX}:{module}:{key}
    """

    def __init__(self, app: Optional[Flask] = None):
        self.client: Optional[redis.Redis] = None
        self.enabled: bool = False
        self.prefix: str = 'estimator'
        if app is not None:
            self.init_app(app)

    def init_app(self, app: Flask) -> None:
        self.enabled = app.config.get('CACHE_ENABLED', True)
        self.prefix = app.config.get('CACHE_KEY_PREFIX', 'estimator')
        if not self.enabled:
            logger.info("[CACHE] Disabled by config")
            return

        redis_url = app.config.get('REDIS_URL', 'redis://localhost:6379/0')
        try:
            self.client = redis.from_url(
                redis_url,
                decode_responses=True,
                socket_connect_timeout=3,
                socket_timeout=3,
                retry_on_timeout=True,
                health_check_interval=30,
            )
            self.client.ping()
            logger.info(f"[CACHE] Redis connected: {redis_url}")
        except RedisError as e:
            # Keep the client: is_available() retries on later calls
            logger.warning(f"[CACHE] Redis unreachable at startup ({e}); serving uncached")

    def is_available(self) -> bool:
        if not self.enabled or self.client is None:
            return False
        try:
            return bool(self.client.ping())
        except RedisError:
            return False

    def key(self, module: str, key: str) -> str:
        return f"{self.prefix}:{module}:{key}"

    def get(self, module: str, key: str) -> Optional[Any]:
        if not self.is_available():
            return None
        try:
            raw = self.client.get(self.key(module, key))
            return None if raw is None else _decode(raw)
        except (RedisError, ValueError) as e:
            logger.warning(f"[CACHE] GET {self.key(module, key)} failed: {e}")
            return None

    def set(self, module: str, key: str, value: Any, ttl: Optional[int] = None) -> bool:
        if not self.is_available():
            return False
        if ttl is None:
            ttl = current_app.config.get('CACHE_DEFAULT_TTL', 60)
        try:
            self.client.setex(self.key(module, key), ttl, _encode(value))
            return True
        except (RedisError, TypeError) as e:
            logger.warning(f"[CACHE] SET {self.key(module, key)} failed: {e}")
            return False

    def delete(self, module: str, key: str) -> bool:
        if not self.is_available():
            return False
        try:
            self.client.delete(self.key(module, key))
            logger.info(f"[CACHE] INVALIDATE {self.key(module, key)}")
            return True
        except RedisError as e:
            logger.warning(f"[CACHE] DELETE {self.key(module, key)} failed: {e}")
            return False

    def memoize(self, module: str, key: str, loader: Callable[[], Any], ttl: Optional[int] = None) -> Any:
        """Return the cached value, or call loader() and cache its result."""
        cached = self.get(module, key)
        if cached is not None:
            logger.debug(f"[CACHE] HIT {self.key(module, key)}")
            return cached
        value = loader()
        self.set(module, key, value, ttl)
        return value


_cache: Optional[CacheService] = None


def init_cache(app: Flask) -> CacheService:
    global _cache
    _cache = CacheService(app)
    app.extensions['cache'] = _cache
    return _cache


def get_cache() -> CacheService:
    if _cache is None:
        raise RuntimeError("Cache not initialized; call init_cache(app) first")
    return _cache
