"""Google Gemini implementation of the multimodal model client (google-genai SDK)."""

import io
import logging
from contextlib import contextmanager
from typing import Any, Dict, Iterator, List, Optional

from ...core.exceptions import ModelRequestFailedError
from .model_client import GenerativeModelClient, InlineDocument, MediaState, RemoteMedia

logger = logging.getLogger(__name__)


def _state_name(state: Any) -> str:
    """FileState enum, plain string or None -> PROCESSING/ACTIVE/FAILED"""
    if state is None:
        return MediaState.PROCESSING
    value = str(getattr(state, "name", None) or state).upper()
    if "ACTIVE" in value:
        return MediaState.ACTIVE
    if "FAILED" in value:
        return MediaState.FAILED
    return MediaState.PROCESSING


@contextmanager
def _provider_call(stage: str) -> Iterator[None]:
    """Re-raise google-genai API errors (auth, quota, 5xx) as ModelRequestFailedError"""
    from google.genai import errors

    try:
        yield
    except errors.APIError as e:
        reason = " ".join(part for part in (e.status, e.message) if part) or str(e)
        logger.error(f"Gemini {stage} failed ({e.code}): {reason}")
        raise ModelRequestFailedError(stage, reason, provider_status=e.code) from e


class GeminiModelClient(GenerativeModelClient):
    """Uploads the video through the Files API and generates against a response schema"""

    def __init__(
        self,
        api_key: str,
        model: str,
        temperature: float = 0.2,
        client: Optional[Any] = None,
    ) -> None:
        self.api_key = api_key
        self.model = model
        self.temperature = temperature
        self._client = client

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key) or self._client is not None

    @property
    def client(self):
        if self._client is None:
            from google import genai

            self._client = genai.Client(api_key=self.api_key)
        return self._client

    def upload_media(self, data: bytes, mime_type: str, display_name: str) -> RemoteMedia:
        with _provider_call("video upload"):
            uploaded = self.client.files.upload(
                file=io.BytesIO(data),
                config={"mime_type": mime_type, "display_name": display_name},
            )
        logger.info(f"Uploaded {display_name} to Gemini as {uploaded.name}")
        return self._to_remote(uploaded, mime_type)

    def get_media(self, name: str) -> RemoteMedia:
        with _provider_call("video processing check"):
            return self._to_remote(self.client.files.get(name=name))

    def generate(
        self,
        media: RemoteMedia,
        documents: List[InlineDocument],
        instruction: str,
        response_schema: Dict[str, Any],
    ) -> str:
        from google.genai import types

        contents = [types.Part.from_uri(file_uri=media.uri, mime_type=media.mime_type)]
        contents.extend(
            types.Part.from_bytes(data=doc.data, mime_type=doc.mime_type) for doc in documents
        )
        contents.append(instruction)

        with _provider_call("analysis"):
            response = self.client.models.generate_content(
                model=self.model,
                contents=contents,
                config=types.GenerateContentConfig(
                    response_mime_type="application/json",
                    response_schema=response_schema,
                    temperature=self.temperature,
                ),
            )
        return (response.text or "").strip()

    def delete_media(self, name: str) -> None:
        with _provider_call("cleanup"):
            self.client.files.delete(name=name)

    @staticmethod
    def _to_remote(file_obj: Any, mime_type: str = "") -> RemoteMedia:
        return RemoteMedia(
            name=file_obj.name,
            uri=getattr(file_obj, "uri", "") or "",
            mime_type=getattr(file_obj, "mime_type", None) or mime_type,
            state=_state_name(getattr(file_obj, "state", None)),
        )
