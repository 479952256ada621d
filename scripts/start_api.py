#!/usr/bin/env python3
# =============================================================================
# scripts/start_api.py - API Server Entry Point
# =============================================================================
# Starts the Product Catalog API under uvicorn.
#
# Usage:
#   # Start server (development)
#   python scripts/start_api.py
#
#   # Or use uvicorn directly
#   uvicorn app.main:app --reload
#
# Host, port and reload come from the environment (.env file).
# =============================================================================

import sys
import os

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import uvicorn

from app.config import settings


def main():
    """Start the API server."""
    print("=" * 60)
    print(settings.APP_NAME)
    print("=" * 60)
    print()
    print(f"Serving on http://{settings.API_HOST}:{settings.API_PORT}")
    print(f"Docs at http://{settings.API_HOST}:{settings.API_PORT}/docs")
    print("Press Ctrl+C to stop")
    print()

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.API_PORT,
        reload=settings.DEBUG,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
