"""
Async HTTP client for the inspection API.

Keeps the session cookie between calls and turns ``{"error": ...}``
responses back into InspectionError subclasses.
"""

# Standard library imports
import logging
from typing import Any, Dict, List, Optional, Sequence, Tuple

# External package imports
import httpx

# Local application imports
from ..application.dto.analysis_dto import AnalysisResultDto, AnalyzeResponse
from ..application.dto.auth_dto import AuthStatusResponse
from ..application.dto.report_dto import (
    ReportDetailResponse,
    ReportListResponse,
    ReportResponse,
    SaveReportResponse,
)
from ..application.dto.upload_dto import UploadReferencesResponse, UploadVideoResponse
from ..core.exceptions import ApiError, InvalidCredentialsError, NetworkError, UnauthorizedError

logger = logging.getLogger(__name__)

# (filename, bytes, content type)
FilePart = Tuple[str, bytes, str]

# Analysis waits on remote media processing; keep well above poll ceiling
DEFAULT_TIMEOUT_SECONDS = 300.0


class InspectionApiClient:
    def __init__(
        self,
        base_url: str,
        http_client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
    ) -> None:
        self._owns_client = http_client is None
        self.http = http_client or httpx.AsyncClient(base_url=base_url, timeout=timeout)

    async def aclose(self) -> None:
        if self._owns_client:
            await self.http.aclose()

    async def __aenter__(self) -> "InspectionApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def _request(self, method: str, path: str, login: bool = False, **kwargs) -> httpx.Response:
        try:
            response = await self.http.request(method, path, **kwargs)
        except httpx.TransportError as e:
            logger.warning(f"{method} {path} failed: {e}")
            raise NetworkError(f"{method} {path} failed: {str(e)}")

        if response.status_code < 400:
            return response

        message = self._error_message(response)
        if response.status_code == 401:
            error_class = InvalidCredentialsError if login else UnauthorizedError
            raise error_class(message, user_message=message)
        raise ApiError(response.status_code, message)

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("error"):
            return str(body["error"])
        return response.text or f"HTTP {response.status_code}"

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    async def login(self, username: str, password: str) -> None:
        await self._request("POST", "/api/login", login=True, json={"username": username, "password": password})

    async def logout(self) -> None:
        await self._request("POST", "/api/logout")

    async def auth_status(self) -> AuthStatusResponse:
        response = await self._request("GET", "/api/auth/status")
        return AuthStatusResponse.model_validate(response.json())

    # -------------------------------------------------------------------------
    # Uploads and analysis
    # -------------------------------------------------------------------------

    async def upload_video(self, video: FilePart) -> UploadVideoResponse:
        response = await self._request("POST", "/api/upload-video", files={"video": video})
        return UploadVideoResponse.model_validate(response.json())

    async def upload_references(self, references: Sequence[FilePart]) -> UploadReferencesResponse:
        files = [("references", reference) for reference in references]
        response = await self._request("POST", "/api/upload-references", files=files)
        return UploadReferencesResponse.model_validate(response.json())

    async def analyze(
        self,
        video_url: str,
        reference_urls: List[str],
        reference_urls_list: List[str],
    ) -> AnalysisResultDto:
        payload = {
            "videoUrl": video_url,
            "referenceUrls": reference_urls,
            "referenceUrlsList": reference_urls_list,
        }
        response = await self._request("POST", "/api/analyze", json=payload)
        return AnalyzeResponse.model_validate(response.json()).result

    # -------------------------------------------------------------------------
    # Reports
    # -------------------------------------------------------------------------

    async def save_report(
        self,
        video_url: str,
        video_file_name: str,
        reference_urls: List[str],
        reference_file_names: List[str],
        reference_urls_list: List[str],
        result: AnalysisResultDto,
    ) -> str:
        payload = {
            "videoUrl": video_url,
            "videoFileName": video_file_name,
            "referenceUrls": reference_urls,
            "referenceFileNames": reference_file_names,
            "referenceUrlsList": reference_urls_list,
            "result": result.model_dump(by_alias=True, mode="json"),
        }
        response = await self._request("POST", "/api/save-report", json=payload)
        return SaveReportResponse.model_validate(response.json()).report_id

    async def list_reports(self) -> List[ReportResponse]:
        response = await self._request("GET", "/api/reports")
        return ReportListResponse.model_validate(response.json()).reports

    async def get_report(self, report_id: str) -> ReportResponse:
        response = await self._request("GET", f"/api/reports/{report_id}")
        return ReportDetailResponse.model_validate(response.json()).report

    async def delete_report(self, report_id: str) -> None:
        await self._request("DELETE", f"/api/reports/{report_id}")

    async def export_report(self, report_id: str) -> bytes:
        response = await self._request("GET", f"/api/reports/{report_id}/export")
        return response.content

    async def export_result(
        self,
        result: AnalysisResultDto,
        video_file_name: str = "",
        reference_file_names: Optional[List[str]] = None,
        reference_urls_list: Optional[List[str]] = None,
    ) -> bytes:
        payload: Dict[str, Any] = {
            "videoFileName": video_file_name,
            "referenceFileNames": reference_file_names or [],
            "referenceUrlsList": reference_urls_list or [],
            "result": result.model_dump(by_alias=True, mode="json"),
        }
        response = await self._request("POST", "/api/export", json=payload)
        return response.content
