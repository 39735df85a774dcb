"""Shared Motor client for the MongoDB report backend (REPORT_STORE_BACKEND=mongo)."""

# Standard library imports
from typing import Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorClient, AsyncIOMotorCollection, AsyncIOMotorDatabase

# Local application imports
from ...core.config import get_settings

REPORT_COLLECTION = "reports"

_mongo_client: Optional[AsyncIOMotorClient] = None
_mongo_database: Optional[AsyncIOMotorDatabase] = None


def get_database(mongo_uri: Optional[str] = None, database_name: Optional[str] = None) -> AsyncIOMotorDatabase:
    """
    Connect on first use and reuse the client afterwards

    Args:
        mongo_uri: MONGO_URI; read from settings when omitted
        database_name: MONGO_DB_NAME; read from settings when omitted
    """
    global _mongo_client, _mongo_database

    if _mongo_database is None:
        settings = get_settings()
        _mongo_client = AsyncIOMotorClient(mongo_uri or settings.mongo_uri)
        _mongo_database = _mongo_client[database_name or settings.mongo_database_name]
    return _mongo_database


def get_report_collection(
    mongo_uri: Optional[str] = None,
    database_name: Optional[str] = None,
) -> AsyncIOMotorCollection:
    return get_database(mongo_uri, database_name)[REPORT_COLLECTION]


def close_connection() -> None:
    global _mongo_client, _mongo_database
    if _mongo_client is not None:
        _mongo_client.close()
    _mongo_client = None
    _mongo_database = None
