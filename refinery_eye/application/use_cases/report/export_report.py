# Standard library imports
import asyncio
import logging
from dataclasses import dataclass

# Local application imports
from ....core.exceptions import ReportNotFoundError, ValidationError
from ....domain.repositories.report_repository import ReportRepository
from ....infrastructure.reporting.pdf_renderer import PdfReportRenderer, export_file_name
from ...dto.report_dto import ExportRequest

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ExportedDocument:
    file_name: str
    content: bytes
    media_type: str = "application/pdf"


class ExportReportUseCase:
    """Use case for exporting a saved report as PDF"""

    def __init__(self, report_repository: ReportRepository, renderer: PdfReportRenderer) -> None:
        self.report_repository = report_repository
        self.renderer = renderer

    async def execute(self, report_id: str) -> ExportedDocument:
        report = await self.report_repository.get_by_id(report_id)
        if report is None:
            raise ReportNotFoundError(report_id)

        content = await asyncio.to_thread(
            self.renderer.render_pdf,
            report.result,
            reference_file_names=report.reference_file_names,
            reference_urls=report.cited_urls,
            report_id=report.id,
            created_by=report.created_by,
            video_file_name=report.video_file_name,
        )
        logger.info(f"Exported report {report_id} ({len(content)} bytes)")
        return ExportedDocument(file_name=export_file_name(), content=content)


class ExportResultUseCase:
    """Use case for exporting an unsaved, in-memory analysis result as PDF"""

    def __init__(self, renderer: PdfReportRenderer) -> None:
        self.renderer = renderer

    async def execute(self, request: ExportRequest) -> ExportedDocument:
        try:
            result = request.result.to_domain()
        except ValueError as e:
            raise ValidationError(f"Invalid result: {str(e)}", user_message=f"Invalid result: {str(e)}")

        content = await asyncio.to_thread(
            self.renderer.render_pdf,
            result,
            reference_file_names=request.reference_file_names,
            reference_urls=request.reference_urls_list,
            video_file_name=request.video_file_name,
        )
        return ExportedDocument(file_name=export_file_name(), content=content)
