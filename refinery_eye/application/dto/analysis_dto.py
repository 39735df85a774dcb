from typing import List, Optional

from pydantic import Field

from ...domain.models.finding import AnalysisResult, InspectionFinding, Severity
from .api_model import ApiModel


class FindingDto(ApiModel):
    """One finding as exchanged with the UI (camelCase keys)"""
    serial_no: int = Field(ge=1)
    timestamp: str
    tag_number: str
    component: str
    fault_type: str
    severity: Severity
    description: str
    recommendation: str
    standard_gap: Optional[str] = None

    @classmethod
    def from_domain(cls, finding: InspectionFinding) -> "FindingDto":
        return cls(
            serial_no=finding.serial_no,
            timestamp=finding.timestamp,
            tag_number=finding.tag_number,
            component=finding.component,
            fault_type=finding.fault_type,
            severity=finding.severity,
            description=finding.description,
            recommendation=finding.recommendation,
            standard_gap=finding.standard_gap,
        )

    def to_domain(self) -> InspectionFinding:
        return InspectionFinding(
            serial_no=self.serial_no,
            timestamp=self.timestamp,
            tag_number=self.tag_number,
            component=self.component,
            fault_type=self.fault_type,
            severity=self.severity,
            description=self.description,
            recommendation=self.recommendation,
            standard_gap=self.standard_gap,
        )


class AnalysisResultDto(ApiModel):
    summary: Optional[str] = None
    findings: List[FindingDto] = Field(default_factory=list)

    @classmethod
    def from_domain(cls, result: AnalysisResult) -> "AnalysisResultDto":
        return cls(
            summary=result.summary,
            findings=[FindingDto.from_domain(f) for f in result.findings],
        )

    def to_domain(self) -> AnalysisResult:
        return AnalysisResult(
            findings=[f.to_domain() for f in self.findings],
            summary=self.summary,
        )


class AnalyzeRequest(ApiModel):
    """``reference_urls`` are uploaded PDF locators; ``reference_urls_list`` are cited web URLs"""
    video_url: str = ""
    reference_urls: List[str] = Field(default_factory=list)
    reference_urls_list: List[str] = Field(default_factory=list)


class AnalyzeResponse(ApiModel):
    success: bool = True
    result: AnalysisResultDto
