"""API routers"""

from barcode_server.api.routes import generate, info

__all__ = ["generate", "info"]
