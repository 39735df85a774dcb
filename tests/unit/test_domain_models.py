"""
Unit tests for domain models (findings, results, reports, sessions)
"""
from datetime import datetime, timedelta, timezone

import pytest

from refinery_eye.domain.models import (
    AnalysisResult,
    AssetRole,
    InspectionFinding,
    Report,
    Session,
    Severity,
)


def make_finding(serial_no=1, severity="High", **overrides):
    fields = dict(
        serial_no=serial_no,
        timestamp="00:10",
        tag_number="TE-2312",
        component="Temperature Element",
        fault_type="Corrosion",
        severity=severity,
        description="Rust on thermowell head",
        recommendation="Clean and repaint per OISD-STD-128",
    )
    fields.update(overrides)
    return InspectionFinding(**fields)


class TestInspectionFinding:
    def test_severity_string_converted_to_enum(self):
        assert make_finding(severity="Critical").severity is Severity.CRITICAL

    def test_unknown_severity_rejected(self):
        with pytest.raises(ValueError):
            make_finding(severity="Severe")

    def test_lowercase_severity_rejected(self):
        with pytest.raises(ValueError):
            make_finding(severity="high")

    def test_serial_no_starts_at_one(self):
        with pytest.raises(ValueError):
            make_finding(serial_no=0)

    @pytest.mark.parametrize("field", ["timestamp", "tag_number", "component", "fault_type"])
    def test_required_text_fields(self, field):
        with pytest.raises(ValueError):
            make_finding(**{field: ""})


class TestAnalysisResult:
    def test_preserves_order_and_counts(self):
        result = AnalysisResult(
            findings=[make_finding(1, "Low"), make_finding(2, "High"), make_finding(3, "High")],
            summary="ok",
        )
        assert [f.serial_no for f in result.findings] == [1, 2, 3]
        assert isinstance(result.findings, tuple)
        assert result.count_by_severity() == {"Low": 1, "Medium": 0, "High": 2, "Critical": 0}


class TestReport:
    def test_requires_video_url(self):
        with pytest.raises(ValueError):
            Report(
                id=None,
                video_url="",
                video_file_name="walk.mp4",
                result=AnalysisResult(),
                created_at=datetime.now(timezone.utc),
                created_by="inspector",
            )

    def test_requires_result(self):
        with pytest.raises(ValueError):
            Report(
                id=None,
                video_url="/api/content/videos/a.mp4",
                video_file_name="walk.mp4",
                result=None,
                created_at=datetime.now(timezone.utc),
                created_by="inspector",
            )


class TestSession:
    def test_expiry(self):
        now = datetime.now(timezone.utc)
        session = Session("sid", "inspector", now, now + timedelta(minutes=1))
        assert session.is_expired(now) is False
        assert session.is_expired(now + timedelta(minutes=1)) is True
        assert session.authenticated is True


def test_asset_role_prefixes():
    assert AssetRole.VIDEO.prefix == "videos"
    assert AssetRole.REFERENCE.prefix == "references"
