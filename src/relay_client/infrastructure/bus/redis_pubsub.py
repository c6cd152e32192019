"""Redis Pub/Sub fan-out of decoded relay messages."""
from __future__ import annotations

import logging
from typing import Any

import redis.asyncio as aioredis

from relay_client.config import settings
from relay_client.infrastructure.bus.serializer import serialize_event

logger = logging.getLogger(__name__)


class RedisPubSubPublisher:
    """Implements application.ports.bus.EventPublisher."""

    def __init__(self, redis: aioredis.Redis) -> None:
        self._redis = redis

    @classmethod
    def from_settings(cls) -> RedisPubSubPublisher:
        return cls(aioredis.from_url(settings.REDIS_URL, decode_responses=True))

    async def publish(self, channel: str, payload: dict[str, Any]) -> None:
        raw = serialize_event(payload.get("event_type", "unknown"), payload)
        receivers = await self._redis.publish(channel, raw)
        logger.debug("Published %s to %s (receivers=%s)", payload.get("event_type"), channel, receivers)

    async def close(self) -> None:
        await self._redis.aclose()
