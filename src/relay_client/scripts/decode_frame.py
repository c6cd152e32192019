"""Debug script: decode an OnMessageCreated graphql-ws data frame read from stdin.

    python -m relay_client.scripts.decode_frame CONNECTION_ID < frame.json
"""
from __future__ import annotations

import logging
import sys

from relay_client.application.exceptions import AppError
from relay_client.config import settings
from relay_client.infrastructure.graphql.mappers.relay_message import event_to_entity
from relay_client.infrastructure.graphql.operations.on_message_created import (
    OnMessageCreatedSubscription,
)
from relay_client.infrastructure.graphql.protocol import decode_data_message

logger = logging.getLogger(__name__)


def decode(connection_id: str, raw: str) -> int:
    try:
        operation = OnMessageCreatedSubscription(connection_id, settings.DEFAULT_DIRECTION)
        data = decode_data_message(raw, operation)
        if data.on_message_created is None:
            logger.info("Frame carries no message")
            return 0
        message = event_to_entity(data.on_message_created)
    except AppError as e:
        logger.error("Cannot decode frame: %s", e.detail)
        return 1
    logger.info("Decoded %s", message)
    return 0


def main() -> None:
    logging.basicConfig(level=settings.LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    if len(sys.argv) != 2:
        logger.error("usage: decode_frame CONNECTION_ID < frame.json")
        sys.exit(2)
    sys.exit(decode(sys.argv[1], sys.stdin.read()))


if __name__ == "__main__":
    main()
