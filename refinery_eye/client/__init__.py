from .api_client import InspectionApiClient
from .workflow import InspectionWorkflow, UploadProgress, UploadStatus, WorkflowState

__all__ = ["InspectionApiClient", "InspectionWorkflow", "UploadProgress", "UploadStatus", "WorkflowState"]
