from typing import List, Optional, Type
from motor.motor_asyncio import AsyncIOMotorClient
from beanie import init_beanie, Document
from pymongo.errors import ServerSelectionTimeoutError

from app.configs.settings import settings
from app.utils.logging import get_logger

logger = get_logger(__name__)


class MongoDB:
    """MongoDB connection manager using Beanie ODM"""

    def __init__(self):
        self.client: Optional[AsyncIOMotorClient] = None
        self.database = None

    async def connect(self, document_models: List[Type[Document]], client: Optional[AsyncIOMotorClient] = None):
        """Connect to MongoDB and initialize Beanie, which also builds the declared indexes"""
        try:
            self.client = client or AsyncIOMotorClient(
                settings.MONGO_URL,
                serverSelectionTimeoutMS=8000,
                connectTimeoutMS=8000,
                socketTimeoutMS=10000,
                maxPoolSize=50,
                minPoolSize=0,
            )

            if client is None:
                await self.client.admin.command('ping')

            self.database = self.client[settings.MONGO_DB]

            await init_beanie(
                database=self.database,
                document_models=document_models
            )
            logger.info(
                f"Beanie initialized with {len(document_models)} document models")

            return True

        except ServerSelectionTimeoutError as e:
            logger.error(
                f"Failed to connect to MongoDB (timeout) at {settings.MONGO_HOST}:{settings.MONGO_PORT}: {e}")
            raise ConnectionError("Cannot connect to MongoDB server")
        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {str(e)}")
            raise

    async def disconnect(self):
        """Disconnect from MongoDB"""
        if self.client:
            self.client.close()
            self.client = None
            self.database = None
            logger.info("Disconnected from MongoDB")


# Global MongoDB instance
mongodb = MongoDB()
