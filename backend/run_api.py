#!/usr/bin/env python
"""
Run the Bastion API server.

Usage:
    python run_api.py
    python run_api.py --reload  # Development mode

JWT_SECRET and JWT_EXPIRES_IN must be set (environment or .env);
the server refuses to start without them.
"""

import argparse
import sys

import uvicorn
from pydantic import ValidationError

from shared.config import get_settings


def main():
    parser = argparse.ArgumentParser(description="Run Bastion API server")
    parser.add_argument("--reload", action="store_true", help="Enable auto-reload")
    parser.add_argument("--host", type=str, help="Host to bind to")
    parser.add_argument("--port", type=int, help="Port to bind to")
    args = parser.parse_args()

    try:
        settings = get_settings()
    except ValidationError as e:
        print(f"Invalid configuration:\n{e}", file=sys.stderr)
        sys.exit(1)

    uvicorn.run(
        "api.app:create_app",
        factory=True,
        host=args.host or settings.host,
        port=args.port or settings.port,
        reload=args.reload or settings.reload,
    )


if __name__ == "__main__":
    main()
