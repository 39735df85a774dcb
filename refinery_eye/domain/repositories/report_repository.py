from abc import ABC, abstractmethod
from typing import List, Optional

from ..models.report import Report


class ReportRepository(ABC):
    """Repository interface - defines contract for report data access"""

    @abstractmethod
    async def append(self, report: Report) -> str:
        """Persist a new report and return its generated id"""
        pass

    @abstractmethod
    async def list_recent(self, limit: int) -> List[Report]:
        """Reports ordered by created_at descending, truncated to limit"""
        pass

    @abstractmethod
    async def get_by_id(self, report_id: str) -> Optional[Report]:
        """Find report by ID"""
        pass

    @abstractmethod
    async def delete(self, report_id: str) -> bool:
        """Delete report by ID; False when nothing was deleted"""
        pass
