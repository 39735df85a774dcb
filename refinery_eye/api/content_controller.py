# Standard library imports
import mimetypes

# External package imports
from fastapi import APIRouter, Depends
from fastapi.responses import FileResponse

# Local application imports
from ..core.exceptions import BlobNotFoundError
from ..di.container import get_container
from ..domain.models.session import Session
from ..domain.repositories.blob_store import BlobStore
from ..infrastructure.storage.local_blob_store import LocalBlobStore
from .dependencies import get_current_session


router = APIRouter(tags=["content"])


@router.get("/content/{storage_path:path}")
async def get_content(
    storage_path: str,
    session: Session = Depends(get_current_session),
) -> FileResponse:
    """
    Serve a locally stored upload back to the UI (video preview)

    Only the local blob backend serves content here; GCS locators are signed URLs.
    """
    blob_store = get_container().get(BlobStore)
    if not isinstance(blob_store, LocalBlobStore):
        raise BlobNotFoundError(storage_path)

    path = blob_store.resolve_path(storage_path)
    media_type, _ = mimetypes.guess_type(path.name)
    return FileResponse(path, media_type=media_type or "application/octet-stream")
