"""
Adapter from model JSON to AnalysisResult.

Accepted shapes:
- ``{"summary", "findings": [...]}`` (current response schema)
- ``{"summary", "faults": [...]}`` with camelCase fields, four severities
- ``{"inspection_report": [...]}`` with equipment_type/remarks/corrective_action, three severities

Severities must be exact enum values. Anything that does not fit raises
ValueError; callers attach the raw text.
"""

from typing import Any, Dict, List, Optional

from ...domain.models.finding import AnalysisResult, InspectionFinding, Severity


def _pick(item: Dict[str, Any], *keys: str) -> Any:
    for key in keys:
        if item.get(key) is not None:
            return item[key]
    return None


def _text(item: Dict[str, Any], *keys: str, required: bool = True) -> Optional[str]:
    value = _pick(item, *keys)
    if value is None:
        if required:
            raise ValueError(f"finding is missing {keys[0]}")
        return None
    if not isinstance(value, str):
        raise ValueError(f"{keys[0]} must be a string")
    return value.strip()


def _severity(item: Dict[str, Any]) -> Severity:
    value = item.get("severity")
    if value not in Severity.values():
        raise ValueError(f"severity {value!r} is not one of {Severity.values()}")
    return Severity(value)


def _serial_no(item: Dict[str, Any], index: int) -> int:
    value = _pick(item, "serial_no", "serialNo")
    if value is None:
        return index + 1
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError("serial_no must be an integer")
    return value


def _finding(item: Any, index: int, legacy_report: bool) -> InspectionFinding:
    if not isinstance(item, dict):
        raise ValueError(f"finding {index + 1} is not an object")

    if legacy_report:
        component_keys = ("equipment_type",)
        description_keys = ("remarks",)
        recommendation_keys = ("corrective_action",)
    else:
        component_keys = ("component",)
        description_keys = ("description",)
        recommendation_keys = ("recommendation",)

    return InspectionFinding(
        serial_no=_serial_no(item, index),
        timestamp=_text(item, "timestamp"),
        tag_number=_text(item, "tag_number", "tagNumber"),
        component=_text(item, *component_keys),
        fault_type=_text(item, "fault_type", "faultType"),
        severity=_severity(item),
        description=_text(item, *description_keys),
        recommendation=_text(item, *recommendation_keys),
        standard_gap=None if legacy_report else _text(item, "standard_gap", "standardGap", required=False),
    )


def normalize_analysis_payload(payload: Any) -> AnalysisResult:
    """
    Convert parsed model JSON into an AnalysisResult.

    Raises:
        ValueError: If the payload matches none of the accepted shapes
    """
    if not isinstance(payload, dict):
        raise ValueError("response is not a JSON object")

    legacy_report = False
    if "findings" in payload:
        items = payload["findings"]
    elif "faults" in payload:
        items = payload["faults"]
    elif "inspection_report" in payload:
        items = payload["inspection_report"]
        legacy_report = True
    else:
        raise ValueError("response has no findings array")

    if not isinstance(items, list):
        raise ValueError("findings must be an array")

    summary = payload.get("summary")
    if summary is not None and not isinstance(summary, str):
        raise ValueError("summary must be a string")

    findings: List[InspectionFinding] = []
    for index, item in enumerate(items):
        try:
            findings.append(_finding(item, index, legacy_report))
        except ValueError as e:
            raise ValueError(f"finding {index + 1}: {e}")

    return AnalysisResult(findings=findings, summary=summary)
