"""Route exports."""

from .health import router as health_router
from .medical import router as medical_router
from .upload import router as upload_router

__all__ = ["upload_router", "medical_router", "health_router"]
