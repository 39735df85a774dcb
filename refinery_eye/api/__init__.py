from .analysis_controller import router as analysis_router
from .auth_controller import router as auth_router
from .content_controller import router as content_router
from .report_controller import router as report_router
from .upload_controller import router as upload_router


__all__ = ["analysis_router", "auth_router", "content_router", "report_router", "upload_router"]
