from abc import ABC, abstractmethod

from ..models.asset import AssetRole, UploadedAsset


class BlobStore(ABC):
    """Storage interface for uploaded video and reference bytes"""

    @abstractmethod
    async def store(
        self,
        data: bytes,
        original_name: str,
        mime_type: str,
        role: AssetRole,
    ) -> UploadedAsset:
        """Persist bytes under a collision-resistant name and return the asset"""
        pass

    @abstractmethod
    async def fetch(self, locator: str) -> bytes:
        """Read back bytes by locator or storage path; raises BlobNotFoundError"""
        pass
