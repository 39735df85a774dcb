from .blob_store import BlobStore
from .identity_verifier import IdentityVerifier
from .report_repository import ReportRepository
from .session_store import SessionStore

__all__ = ["BlobStore", "IdentityVerifier", "ReportRepository", "SessionStore"]
