"""
Redis Manager - Handles the optional Redis cache connection
"""
import json
from typing import Optional, Any
import redis.asyncio as redis

import logging


logger = logging.getLogger(__name__)


class RedisManager:
    """
    Redis manager storing JSON values with expiration
    """

    name = "redis"

    def __init__(self, url: str):
        self.url = url
        self.redis_client: Optional[redis.Redis] = None

    async def connect(self):
        """Establish Redis connection"""
        try:
            self.redis_client = redis.Redis.from_url(
                self.url,
                decode_responses=True,
                socket_connect_timeout=5,
                socket_keepalive=True
            )

            # Test connection
            await self.redis_client.ping()

            logger.info("Connected to Redis cache")

        except Exception as e:
            logger.error(f"Failed to connect to Redis: {str(e)}")
            raise

    async def disconnect(self):
        """Close Redis connection"""
        if self.redis_client:
            await self.redis_client.aclose()
            logger.info("Disconnected from Redis")

    async def set(
        self,
        key: str,
        value: Any,
        expire: Optional[int] = None
    ) -> bool:
        """
        Set a key-value pair with optional expiration

        Args:
            key: Redis key
            value: Value to store (JSON serialized)
            expire: Expiration time in seconds
        """
        try:
            await self.redis_client.set(key, json.dumps(value, default=str), ex=expire)
            return True

        except Exception as e:
            logger.error(f"Error setting Redis key {key}: {str(e)}")
            return False

    async def get(self, key: str) -> Optional[Any]:
        """Get value by key"""
        try:
            value = await self.redis_client.get(key)

            if value is None:
                return None

            try:
                return json.loads(value)
            except json.JSONDecodeError:
                return value

        except Exception as e:
            logger.error(f"Error getting Redis key {key}: {str(e)}")
            return None

    async def delete(self, key: str) -> bool:
        """Delete a key"""
        try:
            await self.redis_client.delete(key)
            return True
        except Exception as e:
            logger.error(f"Error deleting Redis key {key}: {str(e)}")
            return False
