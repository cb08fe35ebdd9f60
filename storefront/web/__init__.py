from .errors import install_error_handlers
from .views import router

__all__ = ["install_error_handlers", "router"]
