# Standard library imports
import logging

# Local application imports
from ....core.exceptions import ValidationError
from ....domain.models.report import Report
from ....domain.repositories.report_repository import ReportRepository
from ....utils.datetime_utils import utc_now
from ...dto.report_dto import SaveReportRequest, SaveReportResponse

logger = logging.getLogger(__name__)


class SaveReportUseCase:
    """Use case for persisting a completed analysis"""

    def __init__(self, report_repository: ReportRepository) -> None:
        self.report_repository = report_repository

    async def execute(self, request: SaveReportRequest, created_by: str) -> SaveReportResponse:
        """
        Args:
            request: Analysis result with the locators and names it was produced from
            created_by: Username of the active session

        Raises:
            ValidationError: If the result does not form a complete report
        """
        try:
            report = Report(
                id=None,
                video_url=request.video_url,
                video_file_name=request.video_file_name,
                result=request.result.to_domain(),
                created_at=utc_now(),
                created_by=created_by,
                reference_urls=list(request.reference_urls),
                reference_file_names=list(request.reference_file_names),
                cited_urls=list(request.reference_urls_list),
            )
        except ValueError as e:
            raise ValidationError(f"Invalid report: {str(e)}", user_message=f"Invalid report: {str(e)}")

        report_id = await self.report_repository.append(report)
        return SaveReportResponse(report_id=report_id)
