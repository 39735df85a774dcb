from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.blob_store import BlobStore
from ...infrastructure.external.model_client import GenerativeModelClient
from ...application.services.analysis_gateway import AnalysisGateway
from ...application.use_cases.analysis.analyze_inspection import AnalyzeInspectionUseCase

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class AnalysisProvider:
    """Analysis provider - the gateway is built per request so test overrides of its stores apply"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        container.register_factory(
            AnalysisGateway,
            lambda: AnalysisGateway(
                blob_store=container.get(BlobStore),
                model_client=container.get(GenerativeModelClient),
                poll_interval_seconds=container.get(Settings).media_poll_interval_seconds,
                max_poll_attempts=container.get(Settings).media_poll_max_attempts,
            )
        )

        container.register_factory(
            AnalyzeInspectionUseCase,
            lambda: AnalyzeInspectionUseCase(analysis_gateway=container.get(AnalysisGateway))
        )
