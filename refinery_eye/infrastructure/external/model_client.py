# Standard library imports
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List


class MediaState:
    PROCESSING = "PROCESSING"
    ACTIVE = "ACTIVE"
    FAILED = "FAILED"


@dataclass(frozen=True)
class RemoteMedia:
    """Handle to media uploaded to the model provider"""
    name: str
    uri: str
    mime_type: str
    state: str = MediaState.PROCESSING


@dataclass(frozen=True)
class InlineDocument:
    """Reference document attached inline to a generate request"""
    data: bytes
    mime_type: str
    display_name: str = ""


class GenerativeModelClient(ABC):
    """
    Multimodal model capability used by the analysis gateway.

    Implementations are synchronous; the gateway runs them in a worker thread.
    """

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """False when the provider credential is missing"""
        pass

    @abstractmethod
    def upload_media(self, data: bytes, mime_type: str, display_name: str) -> RemoteMedia:
        pass

    @abstractmethod
    def get_media(self, name: str) -> RemoteMedia:
        pass

    @abstractmethod
    def generate(
        self,
        media: RemoteMedia,
        documents: List[InlineDocument],
        instruction: str,
        response_schema: Dict[str, Any],
    ) -> str:
        """Run one structured generation and return the raw response text"""
        pass

    @abstractmethod
    def delete_media(self, name: str) -> None:
        pass
