"""Barcode Server - Generate barcodes and 2-D codes over HTTP

Layers (hexagonal / ports and adapters):
- domain: symbologies, bitmaps, scaling and color normalization
- port: use case and encoder/serializer interfaces
- adapter: python-barcode, qrcode, aztec_code_generator and Pillow bindings
- application: encoder dispatch and the generate pipeline
- api: FastAPI endpoints
"""

__version__ = "0.1.0"
