from .storage_provider import StorageProvider
from .auth_provider import AuthProvider
from .upload_provider import UploadProvider
from .analysis_provider import AnalysisProvider
from .report_provider import ReportProvider


__all__ = [
    "StorageProvider",
    "AuthProvider",
    "UploadProvider",
    "AnalysisProvider",
    "ReportProvider",
]
