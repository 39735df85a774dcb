# Standard library imports
from typing import Optional

# Local application imports
from ..core.config import Settings, get_settings
from .base_container import BaseContainer
from .providers import (
    AnalysisProvider,
    AuthProvider,
    ReportProvider,
    StorageProvider,
    UploadProvider,
)


class DIContainer(BaseContainer):
    """
    Application container for the inspection service.

    Providers register in dependency order:
    1. Settings and stores (StorageProvider)
    2. Session handling (AuthProvider) - depends on settings
    3. Use cases and the analysis gateway (Upload/Analysis/Report providers) - depend on stores
    """

    def __init__(self, settings: Optional[Settings] = None) -> None:
        super().__init__()
        self.setup(settings or get_settings())

    def setup(self, settings: Settings) -> None:
        """Register Settings first; every provider reads it"""
        self.register_singleton(Settings, settings)

        # Step 1: blob store, report store, model client, PDF renderer
        StorageProvider.register(self)

        # Step 2: sessions and identity
        AuthProvider.register(self)

        # Step 3: use cases
        UploadProvider.register(self)
        AnalysisProvider.register(self)
        ReportProvider.register(self)


_container: DIContainer | None = None


def get_container() -> DIContainer:
    """Process-wide container, built on first use; tests swap `_container`"""
    global _container
    if _container is None:
        _container = DIContainer()
    return _container
