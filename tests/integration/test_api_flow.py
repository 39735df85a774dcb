"""
Integration tests for the upload -> analyze -> save -> export flow.
Model calls go to the FakeModelClient from conftest; storage lives under tmp_path.
"""
import pytest

from refinery_eye.infrastructure.external.model_client import MediaState

pytestmark = pytest.mark.integration

VIDEO_BYTES = b"\x00\x00\x00\x18ftypmp42" + b"\x00" * 512
PDF_BYTES = b"%PDF-1.4\n%fake reference\n"


def upload_video(client, name="walkdown.mp4", data=VIDEO_BYTES, content_type="video/mp4"):
    return client.post("/api/upload-video", files={"video": (name, data, content_type)})


def upload_references(client, *parts):
    return client.post("/api/upload-references", files=[("references", part) for part in parts])


class TestUploads:
    def test_upload_video(self, logged_in_client):
        response = upload_video(logged_in_client)

        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["filename"] == "walkdown.mp4"
        assert body["storagePath"].startswith("videos/")
        assert body["storagePath"].endswith("-walkdown.mp4")
        assert body["url"] == f"/api/content/{body['storagePath']}"

    def test_uploaded_video_is_served_back(self, logged_in_client):
        body = upload_video(logged_in_client).json()

        response = logged_in_client.get(body["url"])
        assert response.status_code == 200
        assert response.content == VIDEO_BYTES
        assert response.headers["content-type"] == "video/mp4"

    def test_content_path_traversal_is_not_found(self, logged_in_client):
        response = logged_in_client.get("/api/content/..%2F..%2Fetc%2Fpasswd")
        assert response.status_code == 404

    def test_video_too_large(self, logged_in_client):
        response = upload_video(logged_in_client, data=b"\x00" * (1024 * 1024 + 1))
        assert response.status_code == 413
        assert "1MB" in response.json()["error"]

    def test_video_wrong_type(self, logged_in_client):
        response = upload_video(logged_in_client, name="notes.txt", data=b"hello", content_type="text/plain")
        assert response.status_code == 415

    def test_video_missing_field(self, logged_in_client):
        response = logged_in_client.post("/api/upload-video", files={"other": ("a.mp4", b"x", "video/mp4")})
        assert response.status_code == 400
        assert response.json() == {"error": "No file uploaded"}

    def test_references_skip_non_pdf(self, logged_in_client):
        response = upload_references(
            logged_in_client,
            ("oisd-137.pdf", PDF_BYTES, "application/pdf"),
            ("photo.png", b"\x89PNG", "image/png"),
        )

        assert response.status_code == 200
        body = response.json()
        assert [f["filename"] for f in body["files"]] == ["oisd-137.pdf"]
        assert body["files"][0]["storagePath"].startswith("references/")
        assert body["skipped"] == ["photo.png"]

    def test_references_only_non_pdf(self, logged_in_client):
        response = upload_references(logged_in_client, ("photo.png", b"\x89PNG", "image/png"))
        assert response.status_code == 415

    def test_too_many_references(self, logged_in_client):
        parts = [(f"r{i}.pdf", PDF_BYTES, "application/pdf") for i in range(4)]
        assert upload_references(logged_in_client, *parts).status_code == 400


class TestAnalyze:
    def test_analyze_with_references(self, logged_in_client, fake_model_client):
        video = upload_video(logged_in_client).json()
        refs = upload_references(logged_in_client, ("oisd-137.pdf", PDF_BYTES, "application/pdf")).json()

        response = logged_in_client.post(
            "/api/analyze",
            json={
                "videoUrl": video["url"],
                "referenceUrls": [f["url"] for f in refs["files"]],
                "referenceUrlsList": ["https://oisd.gov.in/standards"],
            },
        )

        assert response.status_code == 200
        result = response.json()["result"]
        assert [f["tagNumber"] for f in result["findings"]] == ["20-FV-2300", "Near Unit 3"]
        assert result["findings"][1]["standardGap"] is None

        assert fake_model_client.uploads[0]["data"] == VIDEO_BYTES
        assert fake_model_client.uploads[0]["mime_type"] == "video/mp4"
        call = fake_model_client.generate_calls[0]
        assert [d.data for d in call["documents"]] == [PDF_BYTES]
        assert "https://oisd.gov.in/standards" in call["instruction"]
        assert fake_model_client.deleted == ["files/fake-video"]

    def test_missing_video_url(self, logged_in_client):
        response = logged_in_client.post("/api/analyze", json={"videoUrl": ""})
        assert response.status_code == 400
        assert "upload a video" in response.json()["error"]

    def test_unknown_video_url(self, logged_in_client):
        response = logged_in_client.post("/api/analyze", json={"videoUrl": "/api/content/videos/ghost.mp4"})
        assert response.status_code == 404

    def test_model_not_configured(self, logged_in_client, fake_model_client):
        fake_model_client.configured = False
        video = upload_video(logged_in_client).json()

        response = logged_in_client.post("/api/analyze", json={"videoUrl": video["url"]})
        assert response.status_code == 503
        assert fake_model_client.uploads == []

    def test_malformed_output(self, logged_in_client, fake_model_client):
        fake_model_client.response_text = "Sure! Here are the findings: ..."
        video = upload_video(logged_in_client).json()

        response = logged_in_client.post("/api/analyze", json={"videoUrl": video["url"]})

        assert response.status_code == 502
        assert "Here are the findings" not in response.text
        assert fake_model_client.deleted == ["files/fake-video"]

    def test_processing_timeout(self, logged_in_client, fake_model_client):
        fake_model_client.states = [MediaState.PROCESSING]
        video = upload_video(logged_in_client).json()

        response = logged_in_client.post("/api/analyze", json={"videoUrl": video["url"]})

        assert response.status_code == 504
        assert fake_model_client.polls == 3
        assert fake_model_client.generate_calls == []

    def test_processing_failed(self, logged_in_client, fake_model_client):
        fake_model_client.states = [MediaState.PROCESSING, MediaState.FAILED]
        video = upload_video(logged_in_client).json()

        response = logged_in_client.post("/api/analyze", json={"videoUrl": video["url"]})
        assert response.status_code == 502

    @pytest.mark.parametrize("stage,attribute", [("video upload", "upload_error"), ("analysis", "generate_error")])
    def test_model_request_failure_is_specific(self, logged_in_client, fake_model_client, stage, attribute):
        setattr(fake_model_client, attribute, RuntimeError("429 RESOURCE_EXHAUSTED: quota exceeded"))
        video = upload_video(logged_in_client).json()

        response = logged_in_client.post("/api/analyze", json={"videoUrl": video["url"]})

        assert response.status_code == 502
        assert response.json() == {
            "error": f"Analysis service request failed during {stage}: 429 RESOURCE_EXHAUSTED: quota exceeded"
        }


class TestReports:
    def _analyzed(self, client):
        video = upload_video(client).json()
        result = client.post("/api/analyze", json={"videoUrl": video["url"]}).json()["result"]
        return video, result

    def _save(self, client, video, result):
        response = client.post(
            "/api/save-report",
            json={
                "videoUrl": video["url"],
                "videoFileName": video["filename"],
                "referenceUrls": [],
                "referenceFileNames": [],
                "referenceUrlsList": ["https://oisd.gov.in"],
                "result": result,
            },
        )
        assert response.status_code == 200
        return response.json()["reportId"]

    def test_report_lifecycle(self, logged_in_client, credentials):
        video, result = self._analyzed(logged_in_client)
        report_id = self._save(logged_in_client, video, result)

        listed = logged_in_client.get("/api/reports").json()["reports"]
        assert [r["id"] for r in listed] == [report_id]

        report = logged_in_client.get(f"/api/reports/{report_id}").json()["report"]
        assert report["createdBy"] == credentials[0]
        assert report["videoFileName"] == "walkdown.mp4"
        assert report["referenceUrlsList"] == ["https://oisd.gov.in"]
        assert report["findings"] == result["findings"]
        assert report["summary"] == result["summary"]

        exported = logged_in_client.get(f"/api/reports/{report_id}/export")
        assert exported.status_code == 200
        assert exported.headers["content-type"] == "application/pdf"
        assert "Refinery_Inspection_Report_" in exported.headers["content-disposition"]
        assert exported.content.startswith(b"%PDF")

        assert logged_in_client.delete(f"/api/reports/{report_id}").status_code == 200
        missing = logged_in_client.get(f"/api/reports/{report_id}")
        assert missing.status_code == 404
        assert missing.json() == {"error": "Report not found"}
        assert logged_in_client.delete(f"/api/reports/{report_id}").status_code == 404

    def test_list_newest_first(self, logged_in_client):
        video, result = self._analyzed(logged_in_client)
        first = self._save(logged_in_client, video, result)
        second = self._save(logged_in_client, video, result)

        ids = [r["id"] for r in logged_in_client.get("/api/reports").json()["reports"]]
        assert ids == [second, first]

    def test_save_rejects_bad_severity(self, logged_in_client):
        video, result = self._analyzed(logged_in_client)
        result["findings"][0]["severity"] = "Catastrophic"
        response = logged_in_client.post(
            "/api/save-report", json={"videoUrl": video["url"], "result": result}
        )
        assert response.status_code == 400

    def test_export_unsaved_result(self, logged_in_client):
        _, result = self._analyzed(logged_in_client)
        response = logged_in_client.post(
            "/api/export", json={"videoFileName": "walkdown.mp4", "result": result}
        )
        assert response.status_code == 200
        assert response.content.startswith(b"%PDF")
