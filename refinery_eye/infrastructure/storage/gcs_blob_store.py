# Standard library imports
import asyncio
import logging
from datetime import timedelta
from typing import Any, Optional
from urllib.parse import unquote, urlparse

# External package imports
from google.api_core.exceptions import GoogleAPIError, NotFound

# Local application imports
from ...core.exceptions import BlobNotFoundError, StorageIOError
from ...domain.models.asset import AssetRole, UploadedAsset
from ...domain.repositories.blob_store import BlobStore
from .naming import build_storage_path

logger = logging.getLogger(__name__)

GCS_HOST = "storage.googleapis.com"


class GcsBlobStore(BlobStore):
    """Google Cloud Storage implementation of BlobStore.

    Locators are V4 signed GET URLs; the storage path is the object name.
    """

    def __init__(
        self,
        bucket_name: str,
        signed_url_expiry_days: int = 7,
        client: Optional[Any] = None,
    ) -> None:
        if not bucket_name:
            raise ValueError("GCS_BUCKET_NAME is required for the gcs storage backend")
        if client is None:
            from google.cloud import storage

            client = storage.Client()
        self.bucket_name = bucket_name
        self.bucket = client.bucket(bucket_name)
        self.signed_url_expiry = timedelta(days=signed_url_expiry_days)

    async def store(
        self,
        data: bytes,
        original_name: str,
        mime_type: str,
        role: AssetRole,
    ) -> UploadedAsset:
        object_name = build_storage_path(original_name, role)
        blob = self.bucket.blob(object_name)

        try:
            await asyncio.to_thread(blob.upload_from_string, data, content_type=mime_type)
            url = await asyncio.to_thread(
                blob.generate_signed_url,
                version="v4",
                expiration=self.signed_url_expiry,
                method="GET",
            )
        except GoogleAPIError as e:
            raise StorageIOError(f"Error uploading gs://{self.bucket_name}/{object_name}: {str(e)}", operation="store")

        logger.info(f"Uploaded {role.value} {original_name!r} to gs://{self.bucket_name}/{object_name}")
        return UploadedAsset(
            locator=url,
            original_name=original_name,
            mime_type=mime_type,
            storage_path=object_name,
            role=role,
            size=len(data),
        )

    async def fetch(self, locator: str) -> bytes:
        object_name = self.object_name_from_locator(locator)
        if not object_name:
            raise BlobNotFoundError(locator)

        try:
            return await asyncio.to_thread(self.bucket.blob(object_name).download_as_bytes)
        except NotFound:
            raise BlobNotFoundError(locator)
        except GoogleAPIError as e:
            raise StorageIOError(f"Error downloading {object_name}: {str(e)}", operation="fetch")

    def object_name_from_locator(self, locator: str) -> str:
        """
        Accepts a ``gs://bucket/object`` URI, a signed/public HTTPS URL
        (path-style or virtual-hosted) or a bare object name.
        """
        value = (locator or "").strip()
        if value.lower().startswith("gs://"):
            parts = value.split("/", 3)
            return parts[3] if len(parts) == 4 else ""

        parsed = urlparse(value)
        if parsed.scheme in ("http", "https"):
            path = unquote(parsed.path).lstrip("/")
            if parsed.netloc == f"{self.bucket_name}.{GCS_HOST}":
                return path
            bucket, _, object_name = path.partition("/")
            return object_name if bucket == self.bucket_name else ""

        return value.lstrip("/")
