from .gemini_model_client import GeminiModelClient
from .model_client import GenerativeModelClient, InlineDocument, MediaState, RemoteMedia
from .result_normalizer import normalize_analysis_payload

__all__ = [
    "GeminiModelClient",
    "GenerativeModelClient",
    "InlineDocument",
    "MediaState",
    "RemoteMedia",
    "normalize_analysis_payload",
]
