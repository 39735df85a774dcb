"""
Smoke test - verifies the package imports and settings load.
Run: pytest tests/test_smoke.py -v
"""


def test_import_package(mock_env):
    """Settings come from the environment."""
    from refinery_eye.core.config import Settings

    settings = Settings()
    assert settings.storage_backend == "local"
    assert settings.video_upload_max_bytes == 1024 * 1024


def test_container_resolves_use_cases(app_container):
    from refinery_eye.application.use_cases.analysis import AnalyzeInspectionUseCase
    from refinery_eye.application.use_cases.report import SaveReportUseCase

    assert app_container.get(AnalyzeInspectionUseCase) is not None
    assert app_container.get(SaveReportUseCase) is not None
