# toolshub/services/cache_service.py

import json
import logging
from typing import Any, Optional

import redis
from flask import current_app

logger = logging.getLogger(__name__)

KEY_PREFIX = "toolshub"

TOOLS_LISTING = "tools:all"
CATEGORIES_LISTING = "categories:all"


class CacheService:
    """Listing cache backed by Redis. Every call is a no-op without Redis."""

    _client: Optional[redis.Redis] = None
    _initialized: bool = False
    _url: Optional[str] = None

    def __init__(self):
        redis_url = current_app.config.get("REDIS_URL")
        if not CacheService._initialized or CacheService._url != redis_url:
            self._connect(redis_url)
        self.client = CacheService._client

    def _connect(self, redis_url: Optional[str]) -> None:
        CacheService._initialized = True
        CacheService._url = redis_url
        CacheService._client = None

        if not redis_url:
            logger.info("Redis not configured, listing cache disabled")
            return

        try:
            if "upstash.io" in redis_url and redis_url.startswith("redis://"):
                redis_url = redis_url.replace("redis://", "rediss://", 1)

            CacheService._client = redis.from_url(
                redis_url,
                decode_responses=True,
                socket_timeout=5,
                socket_connect_timeout=5,
                retry_on_timeout=True,
                health_check_interval=30
            )

            CacheService._client.ping()
            logger.info("Redis connected")

        except Exception as e:
            logger.warning(f"Redis connection failed: {e}")
            CacheService._client = None

    @classmethod
    def reset(cls) -> None:
        cls._client = None
        cls._initialized = False
        cls._url = None

    def _available(self) -> bool:
        if self.client is None:
            return False
        try:
            self.client.ping()
            return True
        except Exception:
            return False

    def _key(self, *parts) -> str:
        return f"{KEY_PREFIX}:{':'.join(str(p) for p in parts)}"

    def get(self, name: str) -> Optional[Any]:
        if not self._available():
            return None

        try:
            data = self.client.get(self._key(name))
            return json.loads(data) if data else None
        except Exception as e:
            logger.debug(f"Cache read failed: {e}")
            return None

    def set(self, name: str, value: Any, ttl: int = None) -> bool:
        if not self._available():
            return False

        try:
            ttl = ttl or current_app.config.get("CACHE_TTL_LISTING", 300)
            self.client.setex(self._key(name), ttl, json.dumps(value))
            return True
        except Exception as e:
            logger.debug(f"Cache write failed: {e}")
            return False

    def invalidate(self, *names: str) -> bool:
        if not self._available():
            return False

        try:
            self.client.delete(*[self._key(name) for name in names])
            return True
        except Exception as e:
            logger.warning(f"Cache invalidation failed: {e}")
            return False

    def is_healthy(self) -> Optional[bool]:
        """None when Redis is not configured."""
        if self.client is None:
            return None
        return self._available()
