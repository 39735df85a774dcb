from .upload_references import UploadReferencesUseCase
from .upload_video import UploadVideoUseCase

__all__ = ["UploadReferencesUseCase", "UploadVideoUseCase"]
