from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from .finding import AnalysisResult


@dataclass
class Report:
    """Domain model for a persisted analysis - append-only, never mutated"""
    id: Optional[str]
    video_url: str
    video_file_name: str
    result: AnalysisResult
    created_at: datetime
    created_by: str
    reference_urls: List[str] = field(default_factory=list)
    reference_file_names: List[str] = field(default_factory=list)
    cited_urls: List[str] = field(default_factory=list)

    def __post_init__(self):
        """Business validations"""
        if not self.video_url:
            raise ValueError("Report requires the video locator")
        if self.result is None:
            raise ValueError("Report requires a complete analysis result")
