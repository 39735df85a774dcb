"""
Unit tests for LocalBlobStore and GcsBlobStore
"""
import re
from unittest.mock import MagicMock

import pytest
from google.api_core.exceptions import NotFound

from refinery_eye.core.exceptions import BlobNotFoundError, StorageIOError
from refinery_eye.domain.models.asset import AssetRole
from refinery_eye.infrastructure.storage import GcsBlobStore, LocalBlobStore
from refinery_eye.infrastructure.storage.naming import build_storage_path, safe_file_name


class TestNaming:
    def test_safe_file_name_strips_directories_and_odd_characters(self):
        assert safe_file_name("../../etc/passwd") == "passwd"
        assert safe_file_name("C:\\videos\\unit 3 walk.mp4") == "unit_3_walk.mp4"
        assert safe_file_name("") == "upload"

    def test_storage_path_layout(self):
        path = build_storage_path("walk.mp4", AssetRole.VIDEO)
        assert re.fullmatch(r"videos/\d{13}-[0-9a-f]{8}-walk\.mp4", path)
        assert build_storage_path("std.pdf", AssetRole.REFERENCE).startswith("references/")

    def test_same_name_twice_gives_distinct_paths(self):
        assert build_storage_path("a.pdf", AssetRole.REFERENCE) != build_storage_path("a.pdf", AssetRole.REFERENCE)


class TestLocalBlobStore:
    @pytest.mark.asyncio
    async def test_store_then_fetch_by_locator_and_path(self, tmp_path):
        store = LocalBlobStore(tmp_path)
        asset = await store.store(b"video-bytes", "walk.mp4", "video/mp4", AssetRole.VIDEO)

        assert asset.locator == f"/api/content/{asset.storage_path}"
        assert asset.size == len(b"video-bytes")
        assert asset.role is AssetRole.VIDEO
        assert await store.fetch(asset.locator) == b"video-bytes"
        assert await store.fetch(asset.storage_path) == b"video-bytes"
        assert await store.fetch(f"http://localhost:8080{asset.locator}") == b"video-bytes"

    @pytest.mark.asyncio
    async def test_fetch_missing_raises_not_found(self, tmp_path):
        store = LocalBlobStore(tmp_path)
        with pytest.raises(BlobNotFoundError):
            await store.fetch("/api/content/videos/nothing.mp4")

    @pytest.mark.asyncio
    async def test_fetch_outside_base_dir_is_not_found(self, tmp_path):
        (tmp_path / "secret.txt").write_text("x")
        store = LocalBlobStore(tmp_path / "uploads")
        with pytest.raises(BlobNotFoundError):
            await store.fetch("/api/content/../secret.txt")

    @pytest.mark.asyncio
    async def test_write_failure_maps_to_storage_error(self, tmp_path, monkeypatch):
        store = LocalBlobStore(tmp_path)

        def fail(self, data):
            raise PermissionError("read-only filesystem")

        monkeypatch.setattr("pathlib.Path.write_bytes", fail)
        with pytest.raises(StorageIOError):
            await store.store(b"x", "a.pdf", "application/pdf", AssetRole.REFERENCE)


@pytest.fixture
def gcs_client():
    client = MagicMock()
    bucket = client.bucket.return_value
    blob = bucket.blob.return_value
    blob.generate_signed_url.return_value = "https://storage.googleapis.com/inspections/videos/x.mp4?X-Goog-Signature=abc"
    blob.download_as_bytes.return_value = b"stored"
    return client


class TestGcsBlobStore:
    @pytest.mark.asyncio
    async def test_store_uploads_and_signs(self, gcs_client):
        store = GcsBlobStore("inspections", signed_url_expiry_days=7, client=gcs_client)
        asset = await store.store(b"data", "walk.mp4", "video/mp4", AssetRole.VIDEO)

        blob = gcs_client.bucket.return_value.blob.return_value
        blob.upload_from_string.assert_called_once_with(b"data", content_type="video/mp4")
        kwargs = blob.generate_signed_url.call_args.kwargs
        assert kwargs["version"] == "v4"
        assert kwargs["expiration"].days == 7
        assert asset.locator.startswith("https://storage.googleapis.com/")
        assert asset.storage_path.startswith("videos/")

    @pytest.mark.parametrize(
        "locator,expected",
        [
            ("gs://inspections/references/a.pdf", "references/a.pdf"),
            ("https://storage.googleapis.com/inspections/videos/x%20y.mp4?X-Goog-Signature=1", "videos/x y.mp4"),
            ("https://inspections.storage.googleapis.com/videos/x.mp4", "videos/x.mp4"),
            ("https://storage.googleapis.com/other-bucket/videos/x.mp4", ""),
            ("videos/x.mp4", "videos/x.mp4"),
        ],
    )
    def test_object_name_from_locator(self, gcs_client, locator, expected):
        store = GcsBlobStore("inspections", client=gcs_client)
        assert store.object_name_from_locator(locator) == expected

    @pytest.mark.asyncio
    async def test_fetch_downloads_object(self, gcs_client):
        store = GcsBlobStore("inspections", client=gcs_client)
        assert await store.fetch("gs://inspections/videos/x.mp4") == b"stored"
        gcs_client.bucket.return_value.blob.assert_called_with("videos/x.mp4")

    @pytest.mark.asyncio
    async def test_fetch_missing_object(self, gcs_client):
        gcs_client.bucket.return_value.blob.return_value.download_as_bytes.side_effect = NotFound("gone")
        store = GcsBlobStore("inspections", client=gcs_client)
        with pytest.raises(BlobNotFoundError):
            await store.fetch("videos/x.mp4")

    def test_bucket_required(self, gcs_client):
        with pytest.raises(ValueError):
            GcsBlobStore("", client=gcs_client)
