"""
Client-side inspection workflow.

State machine driving one inspection from video selection to a saved report::

    IDLE -> UPLOADING -> READY_TO_ANALYZE -> ANALYZING -> COMPLETED
                 \\                               \\
                  -> ERROR                         -> ERROR

``reset`` returns to IDLE from any state. Reference PDFs and URLs can be
added in every state except ANALYZING; each upload runs on its own and is
tracked in ``uploads``.
"""

# Standard library imports
import asyncio
import inspect
import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import PurePosixPath
from typing import Awaitable, Callable, Dict, List, Optional, Sequence, Union
from urllib.parse import urlparse

# Local application imports
from ..application.dto.analysis_dto import AnalysisResultDto
from ..application.dto.upload_dto import UploadedFileResponse
from ..core.exceptions import (
    ConfirmationRequiredError,
    FileTooLargeError,
    InspectionError,
    InvalidStateTransitionError,
    ValidationError,
    get_user_message,
)
from ..domain.constants import PDF_MIME
from .api_client import FilePart, InspectionApiClient

logger = logging.getLogger(__name__)

DEFAULT_MAX_VIDEO_BYTES = 100 * 1024 * 1024
NO_REFERENCES_PROMPT = (
    "No reference documents or URLs provided. AI will use general best practices. Continue?"
)

ConfirmCallback = Callable[[str], Union[bool, Awaitable[bool]]]


class WorkflowState(str, Enum):
    IDLE = "idle"
    UPLOADING = "uploading"
    READY_TO_ANALYZE = "ready_to_analyze"
    ANALYZING = "analyzing"
    COMPLETED = "completed"
    ERROR = "error"


class UploadStatus(str, Enum):
    UPLOADING = "uploading"
    DONE = "done"
    FAILED = "failed"


@dataclass
class UploadProgress:
    name: str
    size: int
    status: UploadStatus = UploadStatus.UPLOADING
    error: Optional[str] = None


def _looks_like_pdf(part: FilePart) -> bool:
    name, _, content_type = part
    return content_type == PDF_MIME or PurePosixPath(name).suffix.lower() == ".pdf"


def _is_http_url(value: str) -> bool:
    parsed = urlparse(value)
    return parsed.scheme in ("http", "https") and bool(parsed.netloc)


class InspectionWorkflow:
    def __init__(self, api: InspectionApiClient, max_video_bytes: int = DEFAULT_MAX_VIDEO_BYTES) -> None:
        self.api = api
        self.max_video_bytes = max_video_bytes
        self.reset()

    def reset(self) -> None:
        """Clear all in-memory state; nothing on the server is touched"""
        self.state = WorkflowState.IDLE
        self.video: Optional[UploadedFileResponse] = None
        self.references: List[UploadedFileResponse] = []
        self.reference_urls: List[str] = []
        self.skipped_files: List[str] = []
        self.uploads: Dict[str, UploadProgress] = {}
        self.result: Optional[AnalysisResultDto] = None
        self.report_id: Optional[str] = None
        self.error: Optional[str] = None
        self.save_error: Optional[str] = None

    def _require_not_analyzing(self, action: str) -> None:
        if self.state == WorkflowState.ANALYZING:
            raise InvalidStateTransitionError(
                f"Cannot {action} while analysis is running",
                user_message="Please wait for the current analysis to finish.",
            )

    # -------------------------------------------------------------------------
    # Session
    # -------------------------------------------------------------------------

    async def login(self, username: str, password: str) -> None:
        await self.api.login(username, password)

    async def logout(self) -> None:
        try:
            await self.api.logout()
        finally:
            self.reset()

    # -------------------------------------------------------------------------
    # Inputs
    # -------------------------------------------------------------------------

    async def select_video(self, name: str, data: bytes, content_type: str) -> UploadedFileResponse:
        """
        Upload the inspection video

        Raises:
            FileTooLargeError: Before any request when the file exceeds the ceiling
            InvalidStateTransitionError: While an analysis is running
            InspectionError: When the upload fails (state becomes ERROR)
        """
        self._require_not_analyzing("change the video")
        if len(data) > self.max_video_bytes:
            raise FileTooLargeError(name, self.max_video_bytes)

        self.state = WorkflowState.UPLOADING
        self.video = None
        self.result = None
        self.report_id = None
        self.error = None
        self.save_error = None
        progress = self.uploads[name] = UploadProgress(name=name, size=len(data))

        try:
            self.video = await self.api.upload_video((name, data, content_type))
        except BaseException as e:
            # Includes decoding errors and cancellation, never left in UPLOADING
            progress.status = UploadStatus.FAILED
            progress.error = get_user_message(e)
            self.state = WorkflowState.ERROR
            self.error = get_user_message(e)
            raise

        progress.status = UploadStatus.DONE
        self.state = WorkflowState.READY_TO_ANALYZE
        return self.video

    async def add_references(self, files: Sequence[FilePart]) -> List[UploadedFileResponse]:
        """
        Upload reference PDFs; other files are recorded in ``skipped_files``

        Each file is uploaded concurrently and independently; a failed file is
        marked FAILED in ``uploads`` and does not affect the workflow state.
        """
        self._require_not_analyzing("add references")

        pdfs = [part for part in files if _looks_like_pdf(part)]
        skipped = [part[0] for part in files if not _looks_like_pdf(part)]
        if skipped:
            logger.info(f"Some files were skipped (only PDFs are accepted): {skipped}")
            self.skipped_files.extend(skipped)

        results = await asyncio.gather(*(self._upload_reference(part) for part in pdfs))
        return [uploaded for uploaded in results if uploaded is not None]

    async def _upload_reference(self, part: FilePart) -> Optional[UploadedFileResponse]:
        name, data, _ = part
        progress = self.uploads[name] = UploadProgress(name=name, size=len(data))
        try:
            response = await self.api.upload_references([part])
        except InspectionError as e:
            progress.status = UploadStatus.FAILED
            progress.error = e.user_message
            logger.warning(f"Reference upload failed for {name}: {e.message}")
            return None

        progress.status = UploadStatus.DONE
        self.skipped_files.extend(response.skipped)
        self.references.extend(response.files)
        return response.files[0] if response.files else None

    def remove_reference(self, index: int) -> UploadedFileResponse:
        self._require_not_analyzing("remove references")
        if not 0 <= index < len(self.references):
            raise ValidationError(f"No reference at index {index}")
        return self.references.pop(index)

    def add_reference_url(self, url: str) -> None:
        """
        Raises:
            ValidationError: If the URL is not http(s) or was already added
        """
        self._require_not_analyzing("add reference URLs")
        url = (url or "").strip()
        if not _is_http_url(url):
            raise ValidationError(f"Invalid reference URL {url!r}", user_message="Please enter a valid URL")
        if url in self.reference_urls:
            raise ValidationError(f"Duplicate reference URL {url!r}", user_message="This URL has already been added")
        self.reference_urls.append(url)

    def remove_reference_url(self, index: int) -> str:
        self._require_not_analyzing("remove reference URLs")
        if not 0 <= index < len(self.reference_urls):
            raise ValidationError(f"No reference URL at index {index}")
        return self.reference_urls.pop(index)

    # -------------------------------------------------------------------------
    # Analysis and reports
    # -------------------------------------------------------------------------

    async def analyze(self, confirm: Optional[ConfirmCallback] = None) -> Optional[AnalysisResultDto]:
        """
        Analyze the uploaded video and save the report.

        With no reference PDFs and no URLs, ``confirm`` is asked whether to use
        general best practices; declining returns None and changes nothing.

        Returns:
            The analysis result, or None when the operator declined

        Raises:
            InvalidStateTransitionError: If no video is ready or an analysis is running
            ConfirmationRequiredError: If confirmation is needed and no callback was given
            InspectionError: When the analysis fails (state becomes ERROR)
        """
        self._require_not_analyzing("start another analysis")
        if self.video is None or self.state == WorkflowState.UPLOADING:
            raise InvalidStateTransitionError(
                f"Cannot analyze from state {self.state.value}",
                user_message="Please upload a video first.",
            )

        if not self.references and not self.reference_urls:
            if confirm is None:
                raise ConfirmationRequiredError("Analysis without references needs confirmation")
            answer = confirm(NO_REFERENCES_PROMPT)
            if inspect.isawaitable(answer):
                answer = await answer
            if not answer:
                return None

        self.state = WorkflowState.ANALYZING
        self.result = None
        self.report_id = None
        self.error = None
        self.save_error = None

        try:
            self.result = await self.api.analyze(
                self.video.url,
                [reference.url for reference in self.references],
                list(self.reference_urls),
            )
        except BaseException as e:
            # Includes decoding errors and cancellation, never left in ANALYZING
            self.state = WorkflowState.ERROR
            self.error = get_user_message(e)
            raise

        await self._save()
        self.state = WorkflowState.COMPLETED
        return self.result

    async def _save(self, raise_errors: bool = False) -> None:
        try:
            self.report_id = await self.api.save_report(
                video_url=self.video.url,
                video_file_name=self.video.filename,
                reference_urls=[reference.url for reference in self.references],
                reference_file_names=[reference.filename for reference in self.references],
                reference_urls_list=list(self.reference_urls),
                result=self.result,
            )
            self.save_error = None
        except InspectionError as e:
            # The result stays usable for export and a later save retry
            logger.warning(f"Saving report failed: {e.message}")
            self.save_error = e.user_message
            if raise_errors:
                raise

    async def save_report(self) -> str:
        """Retry saving a completed analysis whose first save failed"""
        if self.state != WorkflowState.COMPLETED or self.result is None:
            raise InvalidStateTransitionError("No completed analysis to save")
        if self.report_id is not None:
            return self.report_id
        await self._save(raise_errors=True)
        return self.report_id

    async def export_pdf(self) -> bytes:
        """PDF of the current result, saved or not"""
        if self.result is None:
            raise InvalidStateTransitionError("No analysis result to export")
        if self.report_id is not None:
            return await self.api.export_report(self.report_id)
        return await self.api.export_result(
            self.result,
            video_file_name=self.video.filename if self.video else "",
            reference_file_names=[reference.filename for reference in self.references],
            reference_urls_list=list(self.reference_urls),
        )
