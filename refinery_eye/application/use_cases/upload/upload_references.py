# Standard library imports
import asyncio
import logging
from typing import List, Sequence

# Local application imports
from ....core.exceptions import UnsupportedMediaTypeError, ValidationError
from ....domain.constants import PDF_MIME
from ....domain.models.asset import AssetRole
from ....domain.repositories.blob_store import BlobStore
from ...dto.upload_dto import UploadedFileResponse, UploadReferencesResponse
from .upload_reading import ReadableUpload, read_within_limit

logger = logging.getLogger(__name__)

GENERIC_CONTENT_TYPES = {"", "application/octet-stream"}


def is_pdf(upload: ReadableUpload) -> bool:
    content_type = (upload.content_type or "").lower()
    if content_type == PDF_MIME:
        return True
    return content_type in GENERIC_CONTENT_TYPES and (upload.filename or "").lower().endswith(".pdf")


class UploadReferencesUseCase:
    """Use case for storing reference PDFs; other file types are skipped, not stored"""

    def __init__(self, blob_store: BlobStore, max_bytes: int, max_files: int) -> None:
        self.blob_store = blob_store
        self.max_bytes = max_bytes
        self.max_files = max_files

    async def execute(self, uploads: Sequence[ReadableUpload]) -> UploadReferencesResponse:
        """
        Raises:
            ValidationError: If no files or too many files were sent
            UnsupportedMediaTypeError: If none of the files is a PDF
            FileTooLargeError: If any PDF exceeds the per-file ceiling
        """
        uploads = [u for u in uploads if u.filename]
        if not uploads:
            raise ValidationError("No reference files in request", user_message="No files uploaded")
        if len(uploads) > self.max_files:
            raise ValidationError(
                f"{len(uploads)} reference files exceed the limit of {self.max_files}",
                user_message=f"Upload at most {self.max_files} reference files at a time.",
            )

        accepted: List[ReadableUpload] = []
        skipped: List[str] = []
        for upload in uploads:
            (accepted if is_pdf(upload) else skipped).append(upload)
        skipped_names = [u.filename for u in skipped]
        if skipped_names:
            logger.info(f"Skipped non-PDF references: {skipped_names}")
        if not accepted:
            raise UnsupportedMediaTypeError(
                f"No PDF among reference uploads {skipped_names}",
                user_message="Only PDF files are accepted as reference documents.",
            )

        contents = [await read_within_limit(upload, self.max_bytes) for upload in accepted]
        assets = await asyncio.gather(
            *(
                self.blob_store.store(data, upload.filename, PDF_MIME, AssetRole.REFERENCE)
                for upload, data in zip(accepted, contents)
            )
        )
        return UploadReferencesResponse(
            files=[UploadedFileResponse.from_asset(asset) for asset in assets],
            skipped=skipped_names,
        )
