"""Instruction text and response schema sent with every inspection analysis."""

from typing import Any, Dict, List

from ...domain.models.finding import Severity

REFERENCE_STANDARDS = (
    "OISD-STD-105 (Work Permit System)",
    "OISD-STD-106 (Pressure Relief & Disposal)",
    "OISD-STD-113 (Classification of Area for Electrical Installations)",
    "OISD-STD-116 (Fire Protection Facilities)",
    "OISD-STD-118 (Layouts for Oil & Gas Installations)",
    "OISD-STD-128 to 135 (Inspection of Pressure Vessels, Piping, Rotating Equipment, etc.)",
    "OISD-STD-137 (Inspection of Electrical Equipment)",
    "OISD-STD-152 (Safety Instrumentation)",
    "GDN-145 (Guidelines for Handling & Storage)",
)

_INSTRUCTION_TEMPLATE = """Role:
You are a Senior Field Instrumentation and Control Valve Inspector at a refinery. Perform a detailed visual walkthrough of the provided video footage. Detect faults, identify equipment tags and check compliance with industry standards without assuming dismantling or advanced diagnostics.

Reference Standards:
Cross-reference observed conditions against the following standards where applicable, alongside any provided PDF documents:
{standards}

Additional Reference Documents: {documents}
Reference URLs: {urls}

Instructions:
1. Analyze the video: identify field instrumentation and control valves. Estimate the MM:SS timestamp of every observation.

2. Identify equipment tags:
   - Look for alphanumeric patterns such as 20-FV-2300, JBS-203, TE-2312.
   - If a tag is visible, record it exactly.
   - If no tag is visible, use "Near [location]" based on nearby signage or describe the location.

3. Detect visual faults:
   Instrumentation faults:
   - Physical damage: cracks, dents, deformation, broken or missing covers/glass.
   - Corrosion: rust on bodies, brackets, connectors; pitting or flaking.
   - Loose or missing hardware: unsecured bolts/nuts, missing nameplates/tags.
   - Cable/conduit: frayed cables, improper gland sealing, loose fittings, open junction boxes.
   - Ingress protection: open enclosures, water/dust/oil accumulation inside.
   - Orientation: transmitters or gauges installed at incorrect angles.
   - Impulse lines: blocked lines, visible dirt, corrosion or leaks.

   Control valve faults:
   - Leakage: gland packing, actuator seals, flanges, hydraulic oil leaks.
   - Actuator: bent or broken linkages, rusted or seized arms.
   - Position indicator: broken, misaligned or missing scale markings.
   - Coating: peeling paint, exposed metal.
   - Vibration/alignment: excessive vibration, loose supports.
   - Air supply: damaged tubing/fittings, moisture or oil in air lines.
   - Manual override: handwheel engaged unintentionally, missing locking devices.

   General observations:
   - Environmental: dust, moisture, chemical exposure.
   - Labeling: missing, faded or illegible tags.
   - Safety: missing guards, damaged insulation, steam/water impinging on instruments.

4. Severity and recommendation:
   - Assign a severity ({severities}) based on the risk to safety or process integrity.
   - Give a recommendation citing the relevant OISD/GDN standard or reference document (e.g. "Restore gland sealing as per OISD-STD-137").
   - Put the violated clause or gap against the reference in standard_gap when one applies.

Output Format:
Return STRICT JSON with a short overall "summary" and a "findings" array numbered by serial_no from 1 in order of appearance.
"""


def build_instruction(reference_urls: List[str], attachment_count: int) -> str:
    """Domain instruction for one analysis; URLs are passed as citations only"""
    return _INSTRUCTION_TEMPLATE.format(
        standards="\n".join(f"- {standard}" for standard in REFERENCE_STANDARDS),
        documents=f"{attachment_count} PDF document(s) provided as attachments." if attachment_count else "None.",
        urls=", ".join(reference_urls) if reference_urls else "None.",
        severities="/".join(Severity.values()),
    )


def _string(description: str) -> Dict[str, Any]:
    return {"type": "STRING", "description": description}


ANALYSIS_RESPONSE_SCHEMA: Dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "summary": _string("Overall condition summary of the inspected area"),
        "findings": {
            "type": "ARRAY",
            "items": {
                "type": "OBJECT",
                "properties": {
                    "serial_no": {"type": "INTEGER", "description": "Sequential number starting from 1"},
                    "timestamp": _string("Time offset into the video, format MM:SS"),
                    "tag_number": _string("Equipment tag (e.g. 20-FV-2300) or 'Near [location]' if not visible"),
                    "component": _string("Equipment type (e.g. Pneumatic Control Valve, Pressure Transmitter)"),
                    "fault_type": _string("Fault category (e.g. Gland Packing Leak, Corroded Junction Box)"),
                    "severity": {"type": "STRING", "enum": Severity.values()},
                    "description": _string("Detailed observation notes"),
                    "recommendation": _string("Corrective action citing an OISD/GDN standard"),
                    "standard_gap": _string("Violated standard clause or reference gap, if any"),
                },
                "required": [
                    "serial_no",
                    "timestamp",
                    "tag_number",
                    "component",
                    "fault_type",
                    "severity",
                    "description",
                    "recommendation",
                ],
            },
        },
    },
    "required": ["summary", "findings"],
}
