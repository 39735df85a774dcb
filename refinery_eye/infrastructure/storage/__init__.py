from .gcs_blob_store import GcsBlobStore
from .local_blob_store import LocalBlobStore

__all__ = ["GcsBlobStore", "LocalBlobStore"]
