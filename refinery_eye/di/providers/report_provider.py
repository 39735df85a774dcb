from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.report_repository import ReportRepository
from ...infrastructure.reporting.pdf_renderer import PdfReportRenderer
from ...application.use_cases.report.delete_report import DeleteReportUseCase
from ...application.use_cases.report.export_report import ExportReportUseCase, ExportResultUseCase
from ...application.use_cases.report.get_report import GetReportUseCase
from ...application.use_cases.report.list_reports import ListReportsUseCase
from ...application.use_cases.report.save_report import SaveReportUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class ReportProvider:
    """Report use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            SaveReportUseCase,
            lambda: SaveReportUseCase(report_repository=container.get(ReportRepository))
        )

        container.register_factory(
            ListReportsUseCase,
            lambda: ListReportsUseCase(
                report_repository=container.get(ReportRepository),
                limit=container.get(Settings).report_list_limit,
            )
        )

        container.register_factory(
            GetReportUseCase,
            lambda: GetReportUseCase(report_repository=container.get(ReportRepository))
        )

        container.register_factory(
            DeleteReportUseCase,
            lambda: DeleteReportUseCase(report_repository=container.get(ReportRepository))
        )

        container.register_factory(
            ExportReportUseCase,
            lambda: ExportReportUseCase(
                report_repository=container.get(ReportRepository),
                renderer=container.get(PdfReportRenderer),
            )
        )

        container.register_factory(
            ExportResultUseCase,
            lambda: ExportResultUseCase(renderer=container.get(PdfReportRenderer))
        )
