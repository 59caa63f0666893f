"""HTTP API layer"""

from barcode_server.api.app import app, create_app

__all__ = ["app", "create_app"]
