# Standard library imports
import os
from typing import Final, List, Optional


def _env_bool(name: str, default: str = "false") -> bool:
    return os.getenv(name, default).strip().lower() in {"1", "true", "yes", "on"}


def _env_list(name: str, default: str) -> List[str]:
    return [item.strip() for item in os.getenv(name, default).split(",") if item.strip()]


class Settings:
    """
    Service configuration read from the environment once per process.

    Credentials (GEMINI_API_KEY, SESSION_SECRET, AUTH_PASSWORD_HASH) live only
    here and reach other components through the DI container.
    """

    def __init__(self) -> None:
        # Gemini Configuration
        self.gemini_api_key: Final[str] = (
            os.getenv("GEMINI_API_KEY") or os.getenv("GOOGLE_API_KEY") or ""
        )
        self.gemini_model: Final[str] = os.getenv("GEMINI_MODEL", "gemini-2.5-flash")
        self.gemini_temperature: Final[float] = float(os.getenv("GEMINI_TEMPERATURE", "0.2"))
        self.media_poll_interval_seconds: Final[float] = float(
            os.getenv("MEDIA_POLL_INTERVAL_SECONDS", "2.0")
        )
        self.media_poll_max_attempts: Final[int] = int(os.getenv("MEDIA_POLL_MAX_ATTEMPTS", "60"))

        # Session Configuration
        self.session_secret: Final[str] = os.getenv(
            "SESSION_SECRET", "refinery-eye-secret-change-in-production"
        )
        self.session_algorithm: Final[str] = os.getenv("SESSION_ALGORITHM", "HS256")
        self.session_ttl_minutes: Final[int] = int(os.getenv("SESSION_TTL_MINUTES", "1440"))
        self.session_cookie_name: Final[str] = os.getenv("SESSION_COOKIE_NAME", "refinery_eye_session")
        self.session_cookie_secure: Final[bool] = _env_bool("SESSION_COOKIE_SECURE")

        # Operator identity (single shared credential)
        self.auth_username: Final[str] = os.getenv("AUTH_USERNAME", "inspector")
        self.auth_password_hash: Final[str] = os.getenv("AUTH_PASSWORD_HASH", "")
        self.auth_password: Final[str] = os.getenv("AUTH_PASSWORD", "")

        # Blob storage Configuration
        self.storage_backend: Final[str] = os.getenv("STORAGE_BACKEND", "local").lower()
        self.upload_dir: Final[str] = os.getenv("UPLOAD_DIR", "./uploads")
        self.gcs_bucket_name: Final[str] = os.getenv("GCS_BUCKET_NAME", "")
        self.gcs_signed_url_expiry_days: Final[int] = int(os.getenv("GCS_SIGNED_URL_EXPIRY_DAYS", "7"))

        # Upload limits
        self.video_upload_max_mb: Final[int] = int(os.getenv("VIDEO_UPLOAD_MAX_MB", "100"))
        self.reference_upload_max_mb: Final[int] = int(os.getenv("REFERENCE_UPLOAD_MAX_MB", "50"))
        self.max_reference_files: Final[int] = int(os.getenv("MAX_REFERENCE_FILES", "10"))

        # Report store Configuration
        self.report_store_backend: Final[str] = os.getenv("REPORT_STORE_BACKEND", "json").lower()
        self.reports_file: Final[str] = os.getenv("REPORTS_FILE", "./data/reports.json")
        self.mongo_uri: Final[str] = os.getenv("MONGO_URI", "mongodb://localhost:27017")
        self.mongo_database_name: Final[str] = os.getenv("MONGO_DB_NAME", "refinery_eye")
        self.report_list_limit: Final[int] = int(os.getenv("REPORT_LIST_LIMIT", "50"))

        # HTTP server Configuration
        self.host: Final[str] = os.getenv("HOST", "0.0.0.0")
        self.port: Final[int] = int(os.getenv("PORT", "8080"))
        self.cors_origins: Final[List[str]] = _env_list(
            "CORS_ORIGINS", "http://localhost:3000,http://localhost:5173"
        )
        self.local_timezone: Final[str] = os.getenv("LOCAL_TIMEZONE", "UTC")
        self.log_level: Final[str] = os.getenv("LOG_LEVEL", "INFO").upper()

    @property
    def video_upload_max_bytes(self) -> int:
        return self.video_upload_max_mb * 1024 * 1024

    @property
    def reference_upload_max_bytes(self) -> int:
        return self.reference_upload_max_mb * 1024 * 1024

    @property
    def session_ttl_seconds(self) -> int:
        return self.session_ttl_minutes * 60


_settings: Optional[Settings] = None


def get_settings() -> Settings:
    """Settings singleton; the first call must come after load_dotenv"""
    global _settings
    if _settings is None:
        _settings = Settings()
    return _settings
