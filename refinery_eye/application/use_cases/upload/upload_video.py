# Standard library imports
import logging
from pathlib import PurePosixPath

# Local application imports
from ....core.exceptions import UnsupportedMediaTypeError, ValidationError
from ....domain.constants import ALLOWED_VIDEO_EXTENSIONS, DEFAULT_VIDEO_MIME
from ....domain.models.asset import AssetRole
from ....domain.repositories.blob_store import BlobStore
from ...dto.upload_dto import UploadVideoResponse
from .upload_reading import ReadableUpload, read_within_limit

logger = logging.getLogger(__name__)


class UploadVideoUseCase:
    """Use case for storing the inspection video"""

    def __init__(self, blob_store: BlobStore, max_bytes: int) -> None:
        self.blob_store = blob_store
        self.max_bytes = max_bytes

    async def execute(self, upload: ReadableUpload) -> UploadVideoResponse:
        """
        Validate and store one video upload

        Raises:
            ValidationError: If no file or an empty file was sent
            UnsupportedMediaTypeError: If the file is not a video
            FileTooLargeError: If the file exceeds the configured ceiling
        """
        filename = upload.filename or ""
        if not filename:
            raise ValidationError("No video file in request", user_message="No file uploaded")

        content_type = (upload.content_type or "").lower()
        extension = PurePosixPath(filename).suffix.lower()
        if not content_type.startswith("video/") and extension not in ALLOWED_VIDEO_EXTENSIONS:
            raise UnsupportedMediaTypeError(
                f"Rejected video upload {filename!r} ({content_type})",
                user_message="Please upload a valid video file.",
            )

        data = await read_within_limit(upload, self.max_bytes)
        if not data:
            raise ValidationError(f"Empty video upload {filename!r}", user_message="Uploaded video is empty")

        mime_type = content_type if content_type.startswith("video/") else DEFAULT_VIDEO_MIME
        asset = await self.blob_store.store(data, filename, mime_type, AssetRole.VIDEO)
        return UploadVideoResponse(
            url=asset.locator,
            filename=asset.original_name,
            storage_path=asset.storage_path,
        )
