# app/utils/cache_util.py
import logging
from typing import Optional

from redis import Redis, RedisError

from app.config.config import settings

logger = logging.getLogger(__name__)


class RecordCache:
    """
    id 기준 read-through 캐시.
    REDIS_URL이 없으면 client가 None이고 모든 호출이 no-op이 된다.
    Redis 오류는 로그만 남기고 무시한다 (DB가 원본).
    """

    def __init__(self, client: Optional[Redis] = None, ttl: int = 300):
        self.client = client
        self.ttl = ttl

    @classmethod
    def from_settings(cls) -> "RecordCache":
        client = Redis.from_url(settings.REDIS_URL) if settings.REDIS_URL else None
        return cls(client, ttl=settings.CACHE_TTL_SECONDS)

    @property
    def enabled(self) -> bool:
        return self.client is not None

    @staticmethod
    def key(entity: str, record_id: int) -> str:
        return f"{entity}:{record_id}"

    def get(self, key: str) -> Optional[str]:
        if not self.enabled:
            return None
        try:
            value = self.client.get(key)
        except RedisError as e:
            logger.warning(f"Cache read failed for {key}: {e}")
            return None
        if isinstance(value, bytes):
            value = value.decode("utf-8")
        return value

    def set(self, key: str, value: str) -> None:
        if not self.enabled:
            return
        try:
            self.client.set(key, value, ex=self.ttl)
        except RedisError as e:
            logger.warning(f"Cache write failed for {key}: {e}")

    def invalidate(self, *keys: str) -> None:
        if not self.enabled or not keys:
            return
        try:
            self.client.delete(*keys)
        except RedisError as e:
            logger.warning(f"Cache invalidation failed for {keys}: {e}")


record_cache = RecordCache.from_settings()
