"""
Run the Barcode Server

This script starts the FastAPI server on http://localhost:8080.
"""

import uvicorn

from barcode_server.api import app

if __name__ == "__main__":
    print("=" * 60)
    print("Starting Barcode Server")
    print("=" * 60)
    print("\nEndpoints:")
    print("  - Usage: http://localhost:8080/")
    print("  - Docs: http://localhost:8080/docs")
    print("  - Health: http://localhost:8080/health")
    print("\nGenerate:")
    print("  - GET /generate/qr/200x200?data=HELLO")
    print("  - GET /generate/ean/300x150?data=5901234123457")
    print("  - GET /generate/code128/400x100?data=Code%20128")
    print("\n" + "=" * 60)

    uvicorn.run(
        app,
        host="0.0.0.0",
        port=8080,
        log_level="info",
        access_log=True,
    )
