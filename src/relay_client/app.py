"""Composition root: wires the relay event service to its Redis fan-out."""
from __future__ import annotations

import logging

from relay_client.infrastructure.bus.redis_pubsub import RedisPubSubPublisher
from relay_client.services.relay_event_service import RelayEventService

logger = logging.getLogger(__name__)


def create_relay_event_service() -> tuple[RelayEventService, RedisPubSubPublisher]:
    """Return the service and the publisher the caller must close on shutdown."""
    publisher = RedisPubSubPublisher.from_settings()
    logger.info("Relay events fan out to Redis")
    return RelayEventService(publisher=publisher), publisher
