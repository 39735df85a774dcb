"""
Exception hierarchy for the inspection service.

Raised by stores, the analysis gateway and use cases; translated into
``{"error": ...}`` responses by the API layer and re-raised by the client
from those responses. Each error carries a user-facing message and the HTTP
status it maps to.
"""

# -----------------------------------------------------------------------------
# Standard library
# -----------------------------------------------------------------------------
from typing import Any, Dict, Optional


# -----------------------------------------------------------------------------
# Base
# -----------------------------------------------------------------------------


class InspectionError(Exception):
    """Base exception for all inspection service errors."""

    status_code: int = 500
    default_user_message: str = "An error occurred. Please try again."

    def __init__(
        self,
        message: str,
        user_message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message)
        self.message = message
        self.user_message = user_message or self.default_user_message
        self.details = details or {}


# -----------------------------------------------------------------------------
# Authentication
# -----------------------------------------------------------------------------


class UnauthorizedError(InspectionError):
    """Raised when no active session is present."""

    status_code = 401
    default_user_message = "Unauthorized"


class InvalidCredentialsError(UnauthorizedError):
    """Raised when a login attempt is rejected."""

    default_user_message = "Invalid credentials"


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------


class ValidationError(InspectionError):
    """Raised when request input fails validation."""

    status_code = 400


class FileTooLargeError(ValidationError):
    """Raised when an upload exceeds its configured size ceiling."""

    status_code = 413

    def __init__(self, filename: str, max_bytes: int):
        max_mb = max_bytes // (1024 * 1024)
        super().__init__(
            f"File {filename!r} exceeds {max_bytes} bytes",
            user_message=f"File too large. Please upload a file smaller than {max_mb}MB.",
            details={"filename": filename, "max_bytes": max_bytes},
        )


class UnsupportedMediaTypeError(ValidationError):
    """Raised when an upload has a media type the endpoint does not accept."""

    status_code = 415


class MissingVideoError(ValidationError):
    """Raised when an analysis is requested without a video locator."""

    def __init__(self):
        super().__init__(
            "Video locator is empty",
            user_message="Video URL required. Please upload a video first.",
        )


class InvalidStateTransitionError(InspectionError):
    """Raised when the client workflow is asked for a transition its state forbids."""

    status_code = 409


class ConfirmationRequiredError(InspectionError):
    """Raised when analysis without references is requested with no way to confirm it."""

    status_code = 409
    default_user_message = (
        "No reference documents or URLs provided. Confirmation is required to "
        "analyze against general best practices."
    )


# -----------------------------------------------------------------------------
# Storage
# -----------------------------------------------------------------------------


class StorageIOError(InspectionError):
    """Raised when a blob or report store read/write fails."""

    status_code = 500
    default_user_message = "Storage operation failed. Please try again."

    def __init__(self, message: str, operation: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation


class NotFoundError(InspectionError):
    """Base exception for failed lookups."""

    status_code = 404
    default_user_message = "Not found"


class ReportNotFoundError(NotFoundError):
    """Raised when a report id does not exist."""

    def __init__(self, report_id: str):
        super().__init__(
            f"Report not found: {report_id}",
            user_message="Report not found",
            details={"report_id": report_id},
        )
        self.report_id = report_id


class BlobNotFoundError(NotFoundError):
    """Raised when a locator does not resolve to stored bytes."""

    def __init__(self, locator: str):
        super().__init__(
            f"Blob not found: {locator}",
            user_message="Uploaded file not found on server. Please upload it again.",
            details={"locator": locator},
        )
        self.locator = locator


# -----------------------------------------------------------------------------
# External model
# -----------------------------------------------------------------------------


class ExternalServiceError(InspectionError):
    """Base exception for failures of the external multimodal model."""

    status_code = 502

    def __init__(self, message: str, service_name: str = "Gemini", **kwargs):
        super().__init__(message, **kwargs)
        self.service_name = service_name


class ServiceUnavailableError(ExternalServiceError):
    """Raised when the model credential is not configured."""

    status_code = 503

    def __init__(self, message: str = "Gemini API key not configured", **kwargs):
        super().__init__(
            message,
            user_message=(
                "Analysis service is not configured. Set GEMINI_API_KEY on the server."
            ),
            **kwargs,
        )


class ProcessingTimeoutError(ExternalServiceError):
    """Raised when uploaded media is still processing after the last poll."""

    status_code = 504

    def __init__(self, file_name: str, attempts: int, interval_seconds: float):
        waited = attempts * interval_seconds
        super().__init__(
            f"Media {file_name} still processing after {attempts} polls",
            user_message=(
                f"Video processing timeout - still processing after {attempts} checks "
                f"(~{waited:.0f}s). Please try again."
            ),
            details={"file_name": file_name, "attempts": attempts},
        )


class ProcessingFailedError(ExternalServiceError):
    """Raised when the model reports that media processing failed."""

    def __init__(self, file_name: str):
        super().__init__(
            f"Media processing failed: {file_name}",
            user_message="Video processing failed on the analysis service.",
            details={"file_name": file_name},
        )


class ModelRequestFailedError(ExternalServiceError):
    """Raised when a call to the model provider fails (auth, quota, network, 5xx)."""

    MAX_REASON_LENGTH = 200

    def __init__(self, stage: str, reason: str, provider_status: Optional[int] = None):
        reason = (reason or "unknown error").strip()[: self.MAX_REASON_LENGTH]
        super().__init__(
            f"Model request failed during {stage}: {reason}",
            user_message=f"Analysis service request failed during {stage}: {reason}",
            details={"stage": stage, "provider_status": provider_status},
        )
        self.stage = stage
        self.reason = reason
        self.provider_status = provider_status


class MalformedModelOutputError(ExternalServiceError):
    """Raised when the model response does not match the declared schema.

    ``raw_text`` is kept for operator diagnostics and must not be returned to
    the end UI.
    """

    def __init__(self, reason: str, raw_text: str):
        super().__init__(
            f"Malformed model output: {reason}",
            user_message="Analysis failed: the model returned an invalid report. Please retry.",
            details={"reason": reason},
        )
        self.reason = reason
        self.raw_text = raw_text


# -----------------------------------------------------------------------------
# Client transport
# -----------------------------------------------------------------------------


class NetworkError(InspectionError):
    """Raised by the client when the server cannot be reached."""

    status_code = 503
    default_user_message = "Cannot reach the inspection server. Check your connection."


class ApiError(InspectionError):
    """Raised by the client for error responses without a more specific class."""

    def __init__(self, status_code: int, message: str):
        super().__init__(message, user_message=message, details={"status_code": status_code})
        self.status_code = status_code


# -----------------------------------------------------------------------------
# Safe user-facing message
# -----------------------------------------------------------------------------

def get_user_message(exc: BaseException) -> str:
    """
    Return a safe, user-facing message for any exception.
    Use this at API/use-case boundaries so internal details are never exposed.
    """
    if isinstance(exc, InspectionError) and getattr(exc, "user_message", None):
        return exc.user_message
    return "Unexpected server error. Please try again."
