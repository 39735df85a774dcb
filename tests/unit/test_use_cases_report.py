"""
Unit tests for report use cases (save, list, get, delete, export).
"""
from unittest.mock import AsyncMock, MagicMock

import pytest

from refinery_eye.application.dto.analysis_dto import AnalysisResultDto
from refinery_eye.application.dto.report_dto import ExportRequest, SaveReportRequest
from refinery_eye.application.use_cases.report import (
    DeleteReportUseCase,
    ExportReportUseCase,
    ExportResultUseCase,
    GetReportUseCase,
    ListReportsUseCase,
    SaveReportUseCase,
)
from refinery_eye.core.exceptions import ReportNotFoundError, ValidationError
from refinery_eye.infrastructure.db import JsonReportRepository


@pytest.fixture
def repository(tmp_path):
    return JsonReportRepository(tmp_path / "reports.json")


@pytest.fixture
def save_request(sample_payload):
    return SaveReportRequest.model_validate(
        {
            "videoUrl": "/api/content/videos/walk.mp4",
            "videoFileName": "walk.mp4",
            "referenceUrls": ["/api/content/references/std.pdf"],
            "referenceFileNames": ["std.pdf"],
            "referenceUrlsList": ["https://oisd.gov.in"],
            "result": {
                "summary": sample_payload["summary"],
                "findings": [
                    {
                        "serialNo": f["serial_no"],
                        "timestamp": f["timestamp"],
                        "tagNumber": f["tag_number"],
                        "component": f["component"],
                        "faultType": f["fault_type"],
                        "severity": f["severity"],
                        "description": f["description"],
                        "recommendation": f["recommendation"],
                        "standardGap": f.get("standard_gap"),
                    }
                    for f in sample_payload["findings"]
                ],
            },
        }
    )


class TestSaveAndRead:
    @pytest.mark.asyncio
    async def test_save_then_get(self, repository, save_request):
        saved = await SaveReportUseCase(repository).execute(save_request, created_by="inspector")
        detail = await GetReportUseCase(repository).execute(saved.report_id)

        report = detail.report
        assert report.id == saved.report_id
        assert report.created_by == "inspector"
        assert report.reference_urls_list == ["https://oisd.gov.in"]
        assert [f.tag_number for f in report.findings] == ["20-FV-2300", "Near Unit 3"]
        assert report.created_at.endswith("Z")

    @pytest.mark.asyncio
    async def test_response_uses_camel_case(self, repository, save_request):
        saved = await SaveReportUseCase(repository).execute(save_request, created_by="inspector")
        detail = await GetReportUseCase(repository).execute(saved.report_id)
        body = detail.model_dump(by_alias=True)
        assert body["report"]["videoFileName"] == "walk.mp4"
        assert body["report"]["findings"][0]["tagNumber"] == "20-FV-2300"
        assert body["report"]["findings"][0]["serialNo"] == 1

    @pytest.mark.asyncio
    async def test_invalid_result_rejected(self, repository, save_request):
        save_request.result.findings[0].tag_number = ""
        with pytest.raises(ValidationError):
            await SaveReportUseCase(repository).execute(save_request, created_by="inspector")

    @pytest.mark.asyncio
    async def test_list_respects_limit(self, repository, save_request):
        for _ in range(3):
            await SaveReportUseCase(repository).execute(save_request, created_by="inspector")
        listed = await ListReportsUseCase(repository, limit=2).execute()
        assert len(listed.reports) == 2

    @pytest.mark.asyncio
    async def test_get_missing(self, repository):
        with pytest.raises(ReportNotFoundError):
            await GetReportUseCase(repository).execute("missing")


class TestDeleteReportUseCase:
    @pytest.mark.asyncio
    async def test_delete_then_missing(self, repository, save_request):
        saved = await SaveReportUseCase(repository).execute(save_request, created_by="inspector")
        await DeleteReportUseCase(repository).execute(saved.report_id, deleted_by="inspector")
        with pytest.raises(ReportNotFoundError):
            await DeleteReportUseCase(repository).execute(saved.report_id, deleted_by="inspector")


class TestExportUseCases:
    @pytest.mark.asyncio
    async def test_export_saved_report(self, repository, save_request):
        saved = await SaveReportUseCase(repository).execute(save_request, created_by="inspector")
        renderer = MagicMock()
        renderer.render_pdf.return_value = b"%PDF-fake"

        document = await ExportReportUseCase(repository, renderer).execute(saved.report_id)

        assert document.content == b"%PDF-fake"
        assert document.file_name.startswith("Refinery_Inspection_Report_")
        kwargs = renderer.render_pdf.call_args.kwargs
        assert kwargs["reference_urls"] == ["https://oisd.gov.in"]
        assert kwargs["reference_file_names"] == ["std.pdf"]

    @pytest.mark.asyncio
    async def test_export_missing_report(self, repository):
        renderer = MagicMock()
        with pytest.raises(ReportNotFoundError):
            await ExportReportUseCase(repository, renderer).execute("missing")
        renderer.render_pdf.assert_not_called()

    @pytest.mark.asyncio
    async def test_export_unsaved_result(self, save_request):
        renderer = MagicMock()
        renderer.render_pdf.return_value = b"%PDF-fake"
        request = ExportRequest(
            video_file_name="walk.mp4",
            reference_file_names=[],
            reference_urls_list=["https://oisd.gov.in"],
            result=save_request.result,
        )
        document = await ExportResultUseCase(renderer).execute(request)
        assert document.media_type == "application/pdf"
        result_arg = renderer.render_pdf.call_args.args[0]
        assert len(result_arg.findings) == 2


def test_result_dto_roundtrip_keeps_order(save_request):
    domain = save_request.result.to_domain()
    assert AnalysisResultDto.from_domain(domain) == save_request.result
