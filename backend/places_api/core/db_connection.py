from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from places_api.core.config import settings
from places_api.core.logger import logs
import logging

class AsyncDBConnection:
    """
    Manages the asynchronous connection to the MongoDB database.
    The Motor client is created lazily on first use and shared for the
    lifetime of the process.
    """
    _client: AsyncIOMotorClient | None = None

    def connect(self) -> AsyncIOMotorClient:
        if AsyncDBConnection._client is None:
            # Motor client is non-blocking, no I/O happens until the first query
            AsyncDBConnection._client = AsyncIOMotorClient(settings.MONGODB_URI)
            logs.log(logging.INFO, f"MongoDB connection initialized (db={settings.MONGO_DB_NAME})")
        return AsyncDBConnection._client

    def get_database(self) -> AsyncIOMotorDatabase:
        """Returns the async database instance."""
        client = self.connect()
        return client[settings.MONGO_DB_NAME]

    def close(self):
        if AsyncDBConnection._client is not None:
            AsyncDBConnection._client.close()
            AsyncDBConnection._client = None
            logs.log(logging.INFO, "MongoDB connection closed")

# Instantiate the connection manager
db_connection = AsyncDBConnection()

# Dependency for FastAPI
async def get_db() -> AsyncIOMotorDatabase:
    return db_connection.get_database()
