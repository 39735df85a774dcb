from ....domain.repositories.report_repository import ReportRepository
from ...dto.report_dto import ReportListResponse, ReportResponse


class ListReportsUseCase:
    def __init__(self, report_repository: ReportRepository, limit: int) -> None:
        self.report_repository = report_repository
        self.limit = limit

    async def execute(self) -> ReportListResponse:
        reports = await self.report_repository.list_recent(self.limit)
        return ReportListResponse(reports=[ReportResponse.from_domain(r) for r in reports])
