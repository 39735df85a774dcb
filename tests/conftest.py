"""
Shared pytest fixtures for refinery_eye tests.
"""
import json
import os
from typing import Any, Dict, List, Optional
from unittest.mock import patch

import pytest

from refinery_eye.infrastructure.external.model_client import (
    GenerativeModelClient,
    InlineDocument,
    MediaState,
    RemoteMedia,
)

TEST_USERNAME = "inspector"
TEST_PASSWORD = "valve-walkdown-2024"


SAMPLE_PAYLOAD: Dict[str, Any] = {
    "summary": "Two faults found on the crude unit control valves.",
    "findings": [
        {
            "serial_no": 1,
            "timestamp": "00:12",
            "tag_number": "20-FV-2300",
            "component": "Pneumatic Control Valve",
            "fault_type": "Gland Packing Leak",
            "severity": "High",
            "description": "Visible hydrocarbon weeping at the gland follower.",
            "recommendation": "Re-pack gland as per OISD-STD-137.",
            "standard_gap": "OISD-STD-137 leak-tightness requirement",
        },
        {
            "serial_no": 2,
            "timestamp": "01:05",
            "tag_number": "Near Unit 3",
            "component": "Junction Box",
            "fault_type": "Open Junction Box",
            "severity": "Medium",
            "description": "Cover missing, cables exposed to rain.",
            "recommendation": "Refit cover and restore IP rating.",
        },
    ],
}


class FakeModelClient(GenerativeModelClient):
    """In-memory GenerativeModelClient; records every call"""

    def __init__(self) -> None:
        self.configured = True
        self.states: List[str] = [MediaState.ACTIVE]
        self.response_text: str = json.dumps(SAMPLE_PAYLOAD)
        self.delete_error: Optional[Exception] = None
        self.upload_error: Optional[Exception] = None
        self.generate_error: Optional[Exception] = None
        self.uploads: List[Dict[str, Any]] = []
        self.polls = 0
        self.generate_calls: List[Dict[str, Any]] = []
        self.deleted: List[str] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    def upload_media(self, data: bytes, mime_type: str, display_name: str) -> RemoteMedia:
        self.uploads.append({"data": data, "mime_type": mime_type, "display_name": display_name})
        if self.upload_error is not None:
            raise self.upload_error
        return RemoteMedia(
            name="files/fake-video",
            uri="https://generativelanguage.example/files/fake-video",
            mime_type=mime_type,
        )

    def get_media(self, name: str) -> RemoteMedia:
        self.polls += 1
        state = self.states[min(self.polls, len(self.states)) - 1]
        return RemoteMedia(
            name=name,
            uri="https://generativelanguage.example/files/fake-video",
            mime_type="video/mp4",
            state=state,
        )

    def generate(
        self,
        media: RemoteMedia,
        documents: List[InlineDocument],
        instruction: str,
        response_schema: Dict[str, Any],
    ) -> str:
        self.generate_calls.append(
            {"media": media, "documents": documents, "instruction": instruction, "schema": response_schema}
        )
        if self.generate_error is not None:
            raise self.generate_error
        return self.response_text

    def delete_media(self, name: str) -> None:
        self.deleted.append(name)
        if self.delete_error is not None:
            raise self.delete_error


@pytest.fixture
def sample_payload():
    return json.loads(json.dumps(SAMPLE_PAYLOAD))


@pytest.fixture
def fake_model_client():
    return FakeModelClient()


@pytest.fixture
def mock_env(tmp_path):
    """Fixture to set common test environment variables."""
    env_vars = {
        "GEMINI_API_KEY": "test_gemini_key_placeholder",
        "SESSION_SECRET": "test_session_secret_for_testing_only",
        "SESSION_TTL_MINUTES": "60",
        "AUTH_USERNAME": TEST_USERNAME,
        "AUTH_PASSWORD": TEST_PASSWORD,
        "AUTH_PASSWORD_HASH": "",
        "STORAGE_BACKEND": "local",
        "UPLOAD_DIR": str(tmp_path / "uploads"),
        "REPORT_STORE_BACKEND": "json",
        "REPORTS_FILE": str(tmp_path / "data" / "reports.json"),
        "MEDIA_POLL_INTERVAL_SECONDS": "0",
        "MEDIA_POLL_MAX_ATTEMPTS": "3",
        "VIDEO_UPLOAD_MAX_MB": "1",
        "REFERENCE_UPLOAD_MAX_MB": "1",
        "MAX_REFERENCE_FILES": "3",
        "LOCAL_TIMEZONE": "UTC",
    }
    with patch.dict(os.environ, env_vars, clear=False):
        yield env_vars


@pytest.fixture
def test_settings(mock_env):
    from refinery_eye.core.config import Settings

    return Settings()


@pytest.fixture
def app_container(test_settings, fake_model_client, monkeypatch):
    """DI container on temp storage with the fake model, installed as the global container"""
    from refinery_eye.di import container as container_module
    from refinery_eye.di.container import DIContainer

    container = DIContainer(test_settings)
    container.register_singleton(GenerativeModelClient, fake_model_client)
    monkeypatch.setattr(container_module, "_container", container)
    return container


@pytest.fixture
def client(app_container):
    """TestClient over a freshly created application using app_container."""
    from fastapi.testclient import TestClient
    from refinery_eye.main import create_application

    with TestClient(create_application()) as c:
        yield c


@pytest.fixture
def logged_in_client(client):
    response = client.post("/api/login", json={"username": TEST_USERNAME, "password": TEST_PASSWORD})
    assert response.status_code == 200
    return client


@pytest.fixture
def credentials():
    return TEST_USERNAME, TEST_PASSWORD
