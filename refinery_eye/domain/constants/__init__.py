"""Constants for domain model field names and media rules"""

from .media_constants import (
    ALLOWED_VIDEO_EXTENSIONS,
    DEFAULT_VIDEO_MIME,
    LOCAL_CONTENT_URL_PREFIX,
    PDF_MIME,
)
from .report_fields import FindingFields, ReportFields

__all__ = [
    "ALLOWED_VIDEO_EXTENSIONS",
    "DEFAULT_VIDEO_MIME",
    "LOCAL_CONTENT_URL_PREFIX",
    "PDF_MIME",
    "FindingFields",
    "ReportFields",
]
