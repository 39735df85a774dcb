# Standard library imports
import logging
from typing import List, Optional

# External package imports
from motor.motor_asyncio import AsyncIOMotorCollection
from bson import ObjectId
from bson.errors import InvalidId
from pymongo import DESCENDING
from pymongo.errors import PyMongoError

# Local application imports
from ...core.exceptions import StorageIOError
from ...domain.constants import ReportFields
from ...domain.models.report import Report
from ...domain.repositories.report_repository import ReportRepository
from .mongo_connection import get_report_collection
from .report_document import report_from_document, report_to_document

logger = logging.getLogger(__name__)


class MongoReportRepository(ReportRepository):
    """MongoDB implementation of ReportRepository"""

    def __init__(self, report_collection: Optional[AsyncIOMotorCollection] = None) -> None:
        self.report_collection = report_collection if report_collection is not None else get_report_collection()

    async def append(self, report: Report) -> str:
        if not report:
            raise ValueError("Report cannot be None")

        document = report_to_document(report, serialize_dates=False)
        try:
            result = await self.report_collection.insert_one(document)
        except PyMongoError as e:
            raise StorageIOError(f"Error saving report: {str(e)}", operation="append")
        return str(result.inserted_id)

    async def list_recent(self, limit: int) -> List[Report]:
        try:
            cursor = (
                self.report_collection.find({})
                .sort(ReportFields.CREATED_AT, DESCENDING)
                .limit(limit)
            )
            documents = await cursor.to_list(length=limit)
        except PyMongoError as e:
            raise StorageIOError(f"Error listing reports: {str(e)}", operation="list")
        return [self._document_to_report(doc) for doc in documents]

    async def get_by_id(self, report_id: str) -> Optional[Report]:
        object_id = self._object_id(report_id)
        if object_id is None:
            return None

        try:
            document = await self.report_collection.find_one({ReportFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise StorageIOError(f"Error finding report by ID: {str(e)}", operation="get")
        if document is None:
            return None
        return self._document_to_report(document)

    async def delete(self, report_id: str) -> bool:
        object_id = self._object_id(report_id)
        if object_id is None:
            return False

        try:
            result = await self.report_collection.delete_one({ReportFields.MONGO_ID: object_id})
        except PyMongoError as e:
            raise StorageIOError(f"Error deleting report: {str(e)}", operation="delete")
        return result.deleted_count > 0

    @staticmethod
    def _object_id(report_id: str) -> Optional[ObjectId]:
        if not report_id:
            return None
        try:
            return ObjectId(report_id)
        except (InvalidId, ValueError, TypeError):
            return None

    def _document_to_report(self, document: dict) -> Report:
        if not document or ReportFields.MONGO_ID not in document:
            raise ValueError("Invalid document: missing _id field")
        return report_from_document(document, str(document[ReportFields.MONGO_ID]))
