from typing import List, Optional

from pydantic import Field

from ...domain.models.report import Report
from ...utils.datetime_utils import to_iso
from .analysis_dto import AnalysisResultDto, FindingDto
from .api_model import ApiModel


class SaveReportRequest(ApiModel):
    video_url: str = Field(min_length=1)
    video_file_name: str = ""
    reference_urls: List[str] = Field(default_factory=list)
    reference_file_names: List[str] = Field(default_factory=list)
    reference_urls_list: List[str] = Field(default_factory=list)
    result: AnalysisResultDto


class SaveReportResponse(ApiModel):
    success: bool = True
    report_id: str


class ReportResponse(ApiModel):
    id: str
    video_url: str
    video_file_name: str
    reference_urls: List[str] = Field(default_factory=list)
    reference_file_names: List[str] = Field(default_factory=list)
    reference_urls_list: List[str] = Field(default_factory=list)
    summary: Optional[str] = None
    findings: List[FindingDto] = Field(default_factory=list)
    created_at: str
    created_by: str

    @classmethod
    def from_domain(cls, report: Report) -> "ReportResponse":
        return cls(
            id=report.id or "",
            video_url=report.video_url,
            video_file_name=report.video_file_name,
            reference_urls=list(report.reference_urls),
            reference_file_names=list(report.reference_file_names),
            reference_urls_list=list(report.cited_urls),
            summary=report.result.summary,
            findings=[FindingDto.from_domain(f) for f in report.result.findings],
            created_at=to_iso(report.created_at),
            created_by=report.created_by,
        )

    def to_result_dto(self) -> AnalysisResultDto:
        return AnalysisResultDto(summary=self.summary, findings=self.findings)


class ReportListResponse(ApiModel):
    success: bool = True
    reports: List[ReportResponse] = Field(default_factory=list)


class ReportDetailResponse(ApiModel):
    success: bool = True
    report: ReportResponse


class ExportRequest(ApiModel):
    """Unsaved result plus the metadata printed on the exported PDF"""
    video_file_name: str = ""
    reference_file_names: List[str] = Field(default_factory=list)
    reference_urls_list: List[str] = Field(default_factory=list)
    result: AnalysisResultDto
