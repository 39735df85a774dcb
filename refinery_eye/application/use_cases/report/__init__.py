from .delete_report import DeleteReportUseCase
from .export_report import ExportedDocument, ExportReportUseCase, ExportResultUseCase
from .get_report import GetReportUseCase
from .list_reports import ListReportsUseCase
from .save_report import SaveReportUseCase

__all__ = [
    "DeleteReportUseCase",
    "ExportedDocument",
    "ExportReportUseCase",
    "ExportResultUseCase",
    "GetReportUseCase",
    "ListReportsUseCase",
    "SaveReportUseCase",
]
