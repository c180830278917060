# database.py
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo.errors import PyMongoError

import config
from errors import DatabaseConnectionError

logger = logging.getLogger(__name__)


class DatabaseConnector:
    """Hands out database handles from a single shared Motor client.

    The client is created on first use and the server is pinged once, so a
    bad URI or an unreachable server surfaces as DatabaseConnectionError on
    the first request instead of on the first query.
    """

    def __init__(self, uri: Optional[str] = None):
        self.uri = uri or config.MONGODB_URI
        self.client: Optional[AsyncIOMotorClient] = None

    async def get_handle(self, database_name: str) -> AsyncIOMotorDatabase:
        if self.client is None:
            client = AsyncIOMotorClient(self.uri)
            try:
                await client.admin.command("ping")
            except PyMongoError as e:
                client.close()
                logger.error(f"Could not connect to MongoDB: {str(e)}")
                raise DatabaseConnectionError(str(e)) from e
            if self.client is None:
                logger.info("Connected to MongoDB")
                self.client = client
            else:
                client.close()
        return self.client[database_name]

    def close(self):
        if self.client is not None:
            self.client.close()
            self.client = None
            logger.info("MongoDB connection closed")


connector = DatabaseConnector()


def get_connector() -> DatabaseConnector:
    return connector
