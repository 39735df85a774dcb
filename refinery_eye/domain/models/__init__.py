from .asset import AssetRole, UploadedAsset
from .finding import AnalysisResult, InspectionFinding, Severity
from .report import Report
from .session import Session

__all__ = [
    "AssetRole",
    "UploadedAsset",
    "AnalysisResult",
    "InspectionFinding",
    "Severity",
    "Report",
    "Session",
]
