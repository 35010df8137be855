"""
MongoDB Manager - Handles the optional MongoDB cache connection
"""
from typing import Optional, Any
from datetime import datetime, timedelta, timezone
from pymongo import AsyncMongoClient

import logging


logger = logging.getLogger(__name__)


class MongoManager:
    """
    MongoDB manager storing cache entries as documents with an expiry time
    """

    name = "mongo"
    COLLECTION = "cache"

    def __init__(self, uri: str, db_name: str):
        self.uri = uri
        self.db_name = db_name
        self.client: Optional[AsyncMongoClient] = None
        self.db = None

    async def connect(self):
        """Establish MongoDB connection"""
        try:
            self.client = AsyncMongoClient(self.uri, serverSelectionTimeoutMS=5000)
            await self.client.admin.command("ping")
            self.db = self.client[self.db_name]

            logger.info(f"Connected to MongoDB database {self.db_name}")

        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {str(e)}")
            raise

    async def disconnect(self):
        """Close MongoDB connection"""
        if self.client:
            await self.client.close()
            logger.info("Disconnected from MongoDB")

    async def set(self, key: str, value: Any, expire: Optional[int] = None) -> bool:
        """Upsert a cache document"""
        document = {"_id": key, "value": value}
        if expire:
            document["expires_at"] = datetime.now(timezone.utc) + timedelta(seconds=expire)

        try:
            await self.db[self.COLLECTION].replace_one({"_id": key}, document, upsert=True)
            return True
        except Exception as e:
            logger.error(f"Error setting Mongo key {key}: {str(e)}")
            return False

    async def get(self, key: str) -> Optional[Any]:
        """Get a non-expired cache value"""
        try:
            document = await self.db[self.COLLECTION].find_one({"_id": key})
        except Exception as e:
            logger.error(f"Error getting Mongo key {key}: {str(e)}")
            return None

        if document is None:
            return None

        expires_at = document.get("expires_at")
        if expires_at is not None:
            if expires_at.tzinfo is None:
                expires_at = expires_at.replace(tzinfo=timezone.utc)
            if expires_at <= datetime.now(timezone.utc):
                return None

        return document.get("value")

    async def delete(self, key: str) -> bool:
        """Delete a cache document"""
        try:
            await self.db[self.COLLECTION].delete_one({"_id": key})
            return True
        except Exception as e:
            logger.error(f"Error deleting Mongo key {key}: {str(e)}")
            return False
