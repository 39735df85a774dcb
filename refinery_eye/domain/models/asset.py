from dataclasses import dataclass
from enum import Enum


class AssetRole(str, Enum):
    VIDEO = "video"
    REFERENCE = "reference"

    @property
    def prefix(self) -> str:
        """Storage folder for this role"""
        return "videos" if self is AssetRole.VIDEO else "references"


@dataclass(frozen=True)
class UploadedAsset:
    """Stored upload; ``locator`` is opaque and fetchable for the life of an analysis"""
    locator: str
    original_name: str
    mime_type: str
    storage_path: str
    role: AssetRole
    size: int = 0
