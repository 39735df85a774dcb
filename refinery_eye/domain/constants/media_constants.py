"""
Shared constants for media uploads (inspection video and reference PDFs).

Used by the upload use cases, the blob stores and the client workflow.
Single place for easier updates.
"""

# -----------------------------------------------------------------------------
# Video uploads
# -----------------------------------------------------------------------------
ALLOWED_VIDEO_EXTENSIONS = frozenset({".mp4", ".webm", ".avi", ".mov", ".mkv"})
DEFAULT_VIDEO_MIME = "video/mp4"

# -----------------------------------------------------------------------------
# Reference documents
# -----------------------------------------------------------------------------
PDF_MIME = "application/pdf"

# Public prefix for locally stored blobs (see api.content_controller)
LOCAL_CONTENT_URL_PREFIX = "/api/content/"
