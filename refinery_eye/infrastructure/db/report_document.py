"""
Mapping between Report domain models and stored documents.

Shared by the JSON file and MongoDB report stores so both persist the same
record shape: camelCase report fields, snake_case finding fields.
"""

# Standard library imports
from datetime import datetime
from typing import Any, Dict

# Local application imports
from ...domain.constants import FindingFields, ReportFields
from ...domain.models.finding import AnalysisResult, InspectionFinding
from ...domain.models.report import Report
from ...utils.datetime_utils import ensure_utc, parse_iso, to_iso


def finding_to_dict(finding: InspectionFinding) -> Dict[str, Any]:
    return {
        FindingFields.SERIAL_NO: finding.serial_no,
        FindingFields.TIMESTAMP: finding.timestamp,
        FindingFields.TAG_NUMBER: finding.tag_number,
        FindingFields.COMPONENT: finding.component,
        FindingFields.FAULT_TYPE: finding.fault_type,
        FindingFields.SEVERITY: finding.severity.value,
        FindingFields.DESCRIPTION: finding.description,
        FindingFields.RECOMMENDATION: finding.recommendation,
        FindingFields.STANDARD_GAP: finding.standard_gap,
    }


def finding_from_dict(data: Dict[str, Any]) -> InspectionFinding:
    return InspectionFinding(
        serial_no=int(data[FindingFields.SERIAL_NO]),
        timestamp=data.get(FindingFields.TIMESTAMP, ""),
        tag_number=data.get(FindingFields.TAG_NUMBER, ""),
        component=data.get(FindingFields.COMPONENT, ""),
        fault_type=data.get(FindingFields.FAULT_TYPE, ""),
        severity=data.get(FindingFields.SEVERITY, ""),
        description=data.get(FindingFields.DESCRIPTION, ""),
        recommendation=data.get(FindingFields.RECOMMENDATION, ""),
        standard_gap=data.get(FindingFields.STANDARD_GAP),
    )


def report_to_document(report: Report, serialize_dates: bool = True) -> Dict[str, Any]:
    """
    Convert Report to a storable dict (without id).

    Args:
        report: Report domain model
        serialize_dates: ISO strings for JSON files, datetimes for MongoDB
    """
    created_at = to_iso(report.created_at) if serialize_dates else ensure_utc(report.created_at)
    return {
        ReportFields.VIDEO_URL: report.video_url,
        ReportFields.VIDEO_FILE_NAME: report.video_file_name,
        ReportFields.REFERENCE_URLS: list(report.reference_urls),
        ReportFields.REFERENCE_FILE_NAMES: list(report.reference_file_names),
        ReportFields.CITED_URLS: list(report.cited_urls),
        ReportFields.SUMMARY: report.result.summary,
        ReportFields.FINDINGS: [finding_to_dict(f) for f in report.result.findings],
        ReportFields.CREATED_AT: created_at,
        ReportFields.CREATED_BY: report.created_by,
    }


def report_from_document(document: Dict[str, Any], report_id: str) -> Report:
    created_at = document.get(ReportFields.CREATED_AT)
    if isinstance(created_at, datetime):
        created_at = ensure_utc(created_at)
    else:
        created_at = parse_iso(created_at)
    if created_at is None:
        raise ValueError(f"Report {report_id} has no valid createdAt")

    result = AnalysisResult(
        findings=[finding_from_dict(f) for f in document.get(ReportFields.FINDINGS) or []],
        summary=document.get(ReportFields.SUMMARY),
    )
    return Report(
        id=report_id,
        video_url=document.get(ReportFields.VIDEO_URL, ""),
        video_file_name=document.get(ReportFields.VIDEO_FILE_NAME, ""),
        result=result,
        created_at=created_at,
        created_by=document.get(ReportFields.CREATED_BY, ""),
        reference_urls=list(document.get(ReportFields.REFERENCE_URLS) or []),
        reference_file_names=list(document.get(ReportFields.REFERENCE_FILE_NAMES) or []),
        cited_urls=list(document.get(ReportFields.CITED_URLS) or []),
    )
