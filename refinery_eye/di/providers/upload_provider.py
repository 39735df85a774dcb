from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.blob_store import BlobStore
from ...application.use_cases.upload.upload_references import UploadReferencesUseCase
from ...application.use_cases.upload.upload_video import UploadVideoUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class UploadProvider:
    """Upload use case provider"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            UploadVideoUseCase,
            lambda: UploadVideoUseCase(
                blob_store=container.get(BlobStore),
                max_bytes=container.get(Settings).video_upload_max_bytes,
            )
        )

        container.register_factory(
            UploadReferencesUseCase,
            lambda: UploadReferencesUseCase(
                blob_store=container.get(BlobStore),
                max_bytes=container.get(Settings).reference_upload_max_bytes,
                max_files=container.get(Settings).max_reference_files,
            )
        )
