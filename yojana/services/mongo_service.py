"""
MongoDB service for user storage
"""
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorDatabase
from pymongo import ASCENDING, ReturnDocument
import logging

from ..config import settings

logger = logging.getLogger(__name__)


class MongoService:
    """Service for MongoDB operations"""

    def __init__(self):
        self.client: Optional[AsyncIOMotorClient] = None
        self.db: Optional[AsyncIOMotorDatabase] = None

    async def connect(self):
        """Connect to MongoDB and make sure indexes exist"""
        try:
            self.client = AsyncIOMotorClient(settings.mongodb_url)
            self.db = self.client[settings.mongodb_db_name]

            # Test connection
            await self.client.admin.command('ping')
            await self.db.users.create_index([("mobileNumber", ASCENDING)], unique=True)
            logger.info("Connected to MongoDB successfully")

        except Exception as e:
            logger.error(f"Failed to connect to MongoDB: {e}")
            raise

    async def close(self):
        """Close MongoDB connection"""
        if self.client:
            self.client.close()
            logger.info("MongoDB connection closed")

    async def health_check(self) -> bool:
        """Check MongoDB connection health"""
        if self.client is None:
            return False
        try:
            await self.client.admin.command('ping')
            return True
        except Exception as e:
            logger.warning(f"MongoDB ping failed: {e}")
            return False

    # User operations
    async def create_user(self, user_doc: Dict[str, Any]) -> Dict[str, Any]:
        """
        Insert a new user document.

        Raises pymongo.errors.DuplicateKeyError when the mobile number is
        already registered.
        """
        now = datetime.now(timezone.utc)
        doc = {**user_doc, "createdAt": now, "updatedAt": now}
        result = await self.db.users.insert_one(doc)
        doc["_id"] = result.inserted_id
        logger.info(f"User created: {doc.get('mobileNumber')}")
        return doc

    async def get_user_by_mobile(self, mobile_number: str) -> Optional[Dict[str, Any]]:
        """Get a user by mobile number"""
        return await self.db.users.find_one({"mobileNumber": mobile_number})

    async def update_scheme_eligibility(
        self,
        mobile_number: str,
        schemes: List[Dict[str, Any]]
    ) -> Optional[Dict[str, Any]]:
        """Replace the stored eligible schemes and return the updated user"""
        return await self.db.users.find_one_and_update(
            {"mobileNumber": mobile_number},
            {"$set": {
                "SchemeEligibility": schemes,
                "updatedAt": datetime.now(timezone.utc)
            }},
            return_document=ReturnDocument.AFTER
        )

    async def count_users(self) -> int:
        return await self.db.users.count_documents({})


# Global MongoDB service instance
mongo_service = MongoService()
