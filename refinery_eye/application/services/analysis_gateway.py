"""
Analysis gateway: one multimodal analysis of an uploaded inspection video.

Flow:
1. Fetch the video and every reference PDF from the blob store (concurrently)
2. Upload the video to the model provider and poll until it is processed
3. Send media + PDFs + instruction + response schema in a single request
4. Parse and normalize the JSON response into an AnalysisResult
5. Delete the remote media (best effort)

No step is retried; callers decide whether to run the analysis again.
"""

import asyncio
import json
import logging
import mimetypes
import posixpath
from typing import Awaitable, Callable, List, Optional, TypeVar
from urllib.parse import urlparse

from ...core.exceptions import (
    InspectionError,
    MalformedModelOutputError,
    MissingVideoError,
    ModelRequestFailedError,
    ProcessingFailedError,
    ProcessingTimeoutError,
    ServiceUnavailableError,
)
from ...domain.constants import DEFAULT_VIDEO_MIME, PDF_MIME
from ...domain.models.finding import AnalysisResult
from ...domain.repositories.blob_store import BlobStore
from ...infrastructure.external.inspection_prompt import ANALYSIS_RESPONSE_SCHEMA, build_instruction
from ...infrastructure.external.model_client import (
    GenerativeModelClient,
    InlineDocument,
    MediaState,
    RemoteMedia,
)
from ...infrastructure.external.result_normalizer import normalize_analysis_payload

logger = logging.getLogger(__name__)

T = TypeVar("T")


def _display_name(locator: str) -> str:
    return posixpath.basename(urlparse(locator).path) or "inspection-video"


def _video_mime_type(locator: str) -> str:
    guessed, _ = mimetypes.guess_type(urlparse(locator).path)
    return guessed if guessed and guessed.startswith("video/") else DEFAULT_VIDEO_MIME


class AnalysisGateway:
    def __init__(
        self,
        blob_store: BlobStore,
        model_client: GenerativeModelClient,
        poll_interval_seconds: float = 2.0,
        max_poll_attempts: int = 60,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        if max_poll_attempts < 1:
            raise ValueError("max_poll_attempts must be at least 1")
        self.blob_store = blob_store
        self.model_client = model_client
        self.poll_interval_seconds = poll_interval_seconds
        self.max_poll_attempts = max_poll_attempts
        self._sleep = sleep

    async def analyze(
        self,
        video_locator: str,
        reference_locators: Optional[List[str]] = None,
        reference_urls: Optional[List[str]] = None,
    ) -> AnalysisResult:
        """
        Run one analysis.

        Raises:
            MissingVideoError: If video_locator is empty
            ServiceUnavailableError: If the model credential is not configured
            BlobNotFoundError / StorageIOError: If any upload cannot be read back
            ProcessingFailedError / ProcessingTimeoutError: If media processing does not finish
            ModelRequestFailedError: If an upload, status or generate call to the model fails
            MalformedModelOutputError: If the response does not parse into findings
        """
        if not video_locator:
            raise MissingVideoError()
        if not self.model_client.is_configured:
            raise ServiceUnavailableError()

        reference_locators = reference_locators or []
        reference_urls = reference_urls or []

        video_bytes, *reference_bytes = await asyncio.gather(
            self.blob_store.fetch(video_locator),
            *(self.blob_store.fetch(locator) for locator in reference_locators),
        )
        documents = [
            InlineDocument(data=data, mime_type=PDF_MIME, display_name=_display_name(locator))
            for locator, data in zip(reference_locators, reference_bytes)
        ]
        logger.info(
            f"Analyzing {video_locator} ({len(video_bytes)} bytes) with "
            f"{len(documents)} reference PDF(s) and {len(reference_urls)} URL(s)"
        )

        media = await self._call_model(
            "video upload",
            self.model_client.upload_media,
            video_bytes,
            _video_mime_type(video_locator),
            _display_name(video_locator),
        )
        try:
            media = await self._wait_until_active(media)
            raw_text = await self._call_model(
                "analysis",
                self.model_client.generate,
                media,
                documents,
                build_instruction(reference_urls, len(documents)),
                ANALYSIS_RESPONSE_SCHEMA,
            )
            result = self._parse(raw_text)
        finally:
            await self._cleanup(media)

        logger.info(f"Analysis complete: {len(result.findings)} finding(s)")
        return result

    async def _wait_until_active(self, media: RemoteMedia) -> RemoteMedia:
        """Poll every interval; still processing at the last poll is a timeout"""
        for attempt in range(1, self.max_poll_attempts + 1):
            media = await self._call_model("video processing check", self.model_client.get_media, media.name)
            if media.state == MediaState.ACTIVE:
                logger.info(f"Media {media.name} ready after {attempt} poll(s)")
                return media
            if media.state == MediaState.FAILED:
                raise ProcessingFailedError(media.name)
            logger.debug(f"Processing {media.name} (attempt {attempt}/{self.max_poll_attempts})")
            if attempt == self.max_poll_attempts:
                break
            await self._sleep(self.poll_interval_seconds)

        raise ProcessingTimeoutError(media.name, self.max_poll_attempts, self.poll_interval_seconds)

    async def _call_model(self, stage: str, func: Callable[..., T], *args) -> T:
        """
        Run a blocking model call in a worker thread

        Raises:
            ModelRequestFailedError: For any failure that is not already an InspectionError
        """
        try:
            return await asyncio.to_thread(func, *args)
        except InspectionError:
            raise
        except Exception as e:
            logger.error(f"Model {stage} failed: {e}", exc_info=True)
            raise ModelRequestFailedError(stage, str(e)) from e

    def _parse(self, raw_text: str) -> AnalysisResult:
        try:
            payload = json.loads(raw_text)
            return normalize_analysis_payload(payload)
        except ValueError as e:
            # json.JSONDecodeError is a ValueError subclass
            logger.error(f"Malformed model output ({e}): {raw_text}")
            raise MalformedModelOutputError(str(e), raw_text)

    async def _cleanup(self, media: RemoteMedia) -> None:
        try:
            await asyncio.to_thread(self.model_client.delete_media, media.name)
            logger.info(f"Deleted remote media {media.name}")
        except Exception as e:
            logger.warning(f"Could not delete remote media {media.name}: {e}")
