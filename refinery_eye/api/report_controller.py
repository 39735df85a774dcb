# External package imports
from fastapi import APIRouter, Depends, Response

# Local application imports
from ..application.dto.auth_dto import SuccessResponse
from ..application.dto.report_dto import (
    ExportRequest,
    ReportDetailResponse,
    ReportListResponse,
    SaveReportRequest,
    SaveReportResponse,
)
from ..application.use_cases.report.delete_report import DeleteReportUseCase
from ..application.use_cases.report.export_report import (
    ExportedDocument,
    ExportReportUseCase,
    ExportResultUseCase,
)
from ..application.use_cases.report.get_report import GetReportUseCase
from ..application.use_cases.report.list_reports import ListReportsUseCase
from ..application.use_cases.report.save_report import SaveReportUseCase
from ..di.container import get_container
from ..domain.models.session import Session
from .dependencies import get_current_session


router = APIRouter(tags=["reports"])


def _pdf_response(document: ExportedDocument) -> Response:
    return Response(
        content=document.content,
        media_type=document.media_type,
        headers={"Content-Disposition": f'attachment; filename="{document.file_name}"'},
    )


@router.post("/save-report", response_model=SaveReportResponse)
async def save_report(
    request: SaveReportRequest,
    session: Session = Depends(get_current_session),
) -> SaveReportResponse:
    container = get_container()
    save_report_use_case = container.get(SaveReportUseCase)
    return await save_report_use_case.execute(request, created_by=session.username)


@router.get("/reports", response_model=ReportListResponse)
async def list_reports(session: Session = Depends(get_current_session)) -> ReportListResponse:
    """
    Saved reports, newest first, capped at REPORT_LIST_LIMIT
    """
    container = get_container()
    list_reports_use_case = container.get(ListReportsUseCase)
    return await list_reports_use_case.execute()


@router.get("/reports/{report_id}", response_model=ReportDetailResponse)
async def get_report(
    report_id: str,
    session: Session = Depends(get_current_session),
) -> ReportDetailResponse:
    container = get_container()
    get_report_use_case = container.get(GetReportUseCase)
    return await get_report_use_case.execute(report_id)


@router.delete("/reports/{report_id}", response_model=SuccessResponse)
async def delete_report(
    report_id: str,
    session: Session = Depends(get_current_session),
) -> SuccessResponse:
    container = get_container()
    delete_report_use_case = container.get(DeleteReportUseCase)
    await delete_report_use_case.execute(report_id, deleted_by=session.username)
    return SuccessResponse()


@router.get("/reports/{report_id}/export")
async def export_report(
    report_id: str,
    session: Session = Depends(get_current_session),
) -> Response:
    container = get_container()
    export_report_use_case = container.get(ExportReportUseCase)
    return _pdf_response(await export_report_use_case.execute(report_id))


@router.post("/export")
async def export_result(
    request: ExportRequest,
    session: Session = Depends(get_current_session),
) -> Response:
    """
    Export an analysis result that has not been saved (e.g. after a failed save)
    """
    container = get_container()
    export_result_use_case = container.get(ExportResultUseCase)
    return _pdf_response(await export_result_use_case.execute(request))
