from ....core.exceptions import ReportNotFoundError
from ....domain.repositories.report_repository import ReportRepository
from ...dto.report_dto import ReportDetailResponse, ReportResponse


class GetReportUseCase:
    def __init__(self, report_repository: ReportRepository) -> None:
        self.report_repository = report_repository

    async def execute(self, report_id: str) -> ReportDetailResponse:
        report = await self.report_repository.get_by_id(report_id)
        if report is None:
            raise ReportNotFoundError(report_id)
        return ReportDetailResponse(report=ReportResponse.from_domain(report))
