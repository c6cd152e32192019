from __future__ import annotations

from pydantic import ConfigDict
from pydantic_settings import BaseSettings

from relay_client.domain.value_objects.enums import Direction


class Settings(BaseSettings):
    REDIS_URL: str = "redis://localhost:6379/0"
    RELAY_PUBSUB_CHANNEL: str = "relay.fanout"

    DEFAULT_DIRECTION: Direction = Direction.INBOUND

    LOG_LEVEL: str = "INFO"

    model_config = ConfigDict(
        env_file=".env",
        extra="ignore",
    )


settings = Settings()
