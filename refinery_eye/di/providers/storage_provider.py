import logging
from typing import TYPE_CHECKING

from ...core.config import Settings
from ...domain.repositories.blob_store import BlobStore
from ...domain.repositories.report_repository import ReportRepository
from ...infrastructure.external.gemini_model_client import GeminiModelClient
from ...infrastructure.external.model_client import GenerativeModelClient
from ...infrastructure.reporting.pdf_renderer import PdfReportRenderer

if TYPE_CHECKING:
    from ..base_container import BaseContainer

logger = logging.getLogger(__name__)


class StorageProvider:
    """Registers blob storage, report storage, the model client and the PDF renderer"""

    @staticmethod
    def register(container: "BaseContainer") -> None:
        settings = container.get(Settings)

        if settings.storage_backend == "gcs":
            from ...infrastructure.storage.gcs_blob_store import GcsBlobStore

            blob_store: BlobStore = GcsBlobStore(
                bucket_name=settings.gcs_bucket_name,
                signed_url_expiry_days=settings.gcs_signed_url_expiry_days,
            )
        else:
            from ...infrastructure.storage.local_blob_store import LocalBlobStore

            blob_store = LocalBlobStore(settings.upload_dir)
        container.register_singleton(BlobStore, blob_store)

        if settings.report_store_backend == "mongo":
            from ...infrastructure.db.mongo_connection import get_report_collection
            from ...infrastructure.db.mongo_report_repository import MongoReportRepository

            report_repository: ReportRepository = MongoReportRepository(
                get_report_collection(settings.mongo_uri, settings.mongo_database_name)
            )
        else:
            from ...infrastructure.db.json_report_repository import JsonReportRepository

            report_repository = JsonReportRepository(settings.reports_file)
        container.register_singleton(ReportRepository, report_repository)

        model_client = GeminiModelClient(
            api_key=settings.gemini_api_key,
            model=settings.gemini_model,
            temperature=settings.gemini_temperature,
        )
        if not model_client.is_configured:
            logger.warning("GEMINI_API_KEY is not set; analysis requests will return 503")
        container.register_singleton(GenerativeModelClient, model_client)

        container.register_singleton(
            PdfReportRenderer,
            PdfReportRenderer(engine_name=settings.gemini_model, local_timezone=settings.local_timezone),
        )

        logger.info(
            f"Registered storage (blobs={settings.storage_backend}, reports={settings.report_store_backend})"
        )
