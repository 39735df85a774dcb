from .json_report_repository import JsonReportRepository
from .mongo_report_repository import MongoReportRepository

__all__ = ["JsonReportRepository", "MongoReportRepository"]
