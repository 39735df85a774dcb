from .analysis_dto import AnalysisResultDto, AnalyzeRequest, AnalyzeResponse, FindingDto
from .auth_dto import AuthStatusResponse, LoginRequest, SuccessResponse
from .report_dto import (
    ExportRequest,
    ReportDetailResponse,
    ReportListResponse,
    ReportResponse,
    SaveReportRequest,
    SaveReportResponse,
)
from .upload_dto import UploadedFileResponse, UploadReferencesResponse, UploadVideoResponse

__all__ = [
    "AnalysisResultDto",
    "AnalyzeRequest",
    "AnalyzeResponse",
    "FindingDto",
    "AuthStatusResponse",
    "LoginRequest",
    "SuccessResponse",
    "ExportRequest",
    "ReportDetailResponse",
    "ReportListResponse",
    "ReportResponse",
    "SaveReportRequest",
    "SaveReportResponse",
    "UploadedFileResponse",
    "UploadReferencesResponse",
    "UploadVideoResponse",
]
