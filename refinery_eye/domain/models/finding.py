from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


class Severity(str, Enum):
    """Finding severity. The three-level legacy scale is a subset of this one."""
    LOW = "Low"
    MEDIUM = "Medium"
    HIGH = "High"
    CRITICAL = "Critical"

    @classmethod
    def values(cls) -> List[str]:
        return [member.value for member in cls]


@dataclass(frozen=True)
class InspectionFinding:
    """One fault or observation reported for the inspected video"""
    serial_no: int
    timestamp: str
    tag_number: str
    component: str
    fault_type: str
    severity: Severity
    description: str
    recommendation: str
    standard_gap: Optional[str] = None

    def __post_init__(self):
        """Business validations"""
        if self.serial_no < 1:
            raise ValueError("serial_no must start at 1")
        if not isinstance(self.severity, Severity):
            object.__setattr__(self, "severity", Severity(self.severity))
        for name in ("timestamp", "tag_number", "component", "fault_type"):
            if not getattr(self, name):
                raise ValueError(f"{name} is required")


@dataclass(frozen=True)
class AnalysisResult:
    """Structured output of one analysis; findings keep the model's order"""
    findings: Tuple[InspectionFinding, ...] = field(default_factory=tuple)
    summary: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, "findings", tuple(self.findings))

    def count_by_severity(self) -> dict:
        counts = {severity.value: 0 for severity in Severity}
        for finding in self.findings:
            counts[finding.severity.value] += 1
        return counts
