import logging

from ....core.exceptions import ReportNotFoundError
from ....domain.repositories.report_repository import ReportRepository

logger = logging.getLogger(__name__)


class DeleteReportUseCase:
    def __init__(self, report_repository: ReportRepository) -> None:
        self.report_repository = report_repository

    async def execute(self, report_id: str, deleted_by: str) -> None:
        if not await self.report_repository.delete(report_id):
            raise ReportNotFoundError(report_id)
        logger.info(f"Report {report_id} deleted by {deleted_by}")
