from typing import List

from pydantic import Field

from ...domain.models.asset import UploadedAsset
from .api_model import ApiModel


class UploadedFileResponse(ApiModel):
    url: str
    filename: str
    storage_path: str

    @classmethod
    def from_asset(cls, asset: UploadedAsset) -> "UploadedFileResponse":
        return cls(url=asset.locator, filename=asset.original_name, storage_path=asset.storage_path)


class UploadVideoResponse(UploadedFileResponse):
    success: bool = True


class UploadReferencesResponse(ApiModel):
    success: bool = True
    files: List[UploadedFileResponse] = Field(default_factory=list)
    skipped: List[str] = Field(default_factory=list)
