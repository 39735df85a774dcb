# Standard library imports
import asyncio
import logging
from pathlib import Path
from urllib.parse import unquote, urlparse

# Local application imports
from ...core.exceptions import BlobNotFoundError, StorageIOError
from ...domain.constants import LOCAL_CONTENT_URL_PREFIX
from ...domain.models.asset import AssetRole, UploadedAsset
from ...domain.repositories.blob_store import BlobStore
from .naming import build_storage_path

logger = logging.getLogger(__name__)


class LocalBlobStore(BlobStore):
    """Filesystem implementation of BlobStore.

    Files live under ``base_dir/<videos|references>/``; locators are
    ``/api/content/<storage path>`` URLs served by the content route.
    """

    def __init__(self, base_dir: str | Path) -> None:
        self.base_dir = Path(base_dir).resolve()
        for role in AssetRole:
            (self.base_dir / role.prefix).mkdir(parents=True, exist_ok=True)

    async def store(
        self,
        data: bytes,
        original_name: str,
        mime_type: str,
        role: AssetRole,
    ) -> UploadedAsset:
        storage_path = build_storage_path(original_name, role)
        target = self.base_dir / storage_path

        try:
            await asyncio.to_thread(target.write_bytes, data)
        except OSError as e:
            raise StorageIOError(f"Error writing {storage_path}: {str(e)}", operation="store")

        logger.info(f"Stored {role.value} {original_name!r} at {target} ({len(data)} bytes)")
        return UploadedAsset(
            locator=f"{LOCAL_CONTENT_URL_PREFIX}{storage_path}",
            original_name=original_name,
            mime_type=mime_type,
            storage_path=storage_path,
            role=role,
            size=len(data),
        )

    async def fetch(self, locator: str) -> bytes:
        path = self.resolve_path(locator)
        try:
            return await asyncio.to_thread(path.read_bytes)
        except FileNotFoundError:
            raise BlobNotFoundError(locator)
        except OSError as e:
            raise StorageIOError(f"Error reading {path}: {str(e)}", operation="fetch")

    def resolve_path(self, locator: str) -> Path:
        """
        Map a locator (content URL, absolute URL or storage path) to a file
        under base_dir.

        Raises:
            BlobNotFoundError: If the locator escapes base_dir or the file is missing
        """
        storage_path = unquote(urlparse(locator or "").path)
        if storage_path.startswith(LOCAL_CONTENT_URL_PREFIX):
            storage_path = storage_path[len(LOCAL_CONTENT_URL_PREFIX):]
        storage_path = storage_path.lstrip("/")
        if not storage_path:
            raise BlobNotFoundError(locator)

        path = (self.base_dir / storage_path).resolve()
        if not path.is_relative_to(self.base_dir) or not path.is_file():
            raise BlobNotFoundError(locator)
        return path
