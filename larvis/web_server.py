#!/usr/bin/env python3
"""
Entry point for running the Larvis HTTP API.
"""

import argparse
import sys

import uvicorn


def main():
    """Main entry point for the web server."""
    parser = argparse.ArgumentParser(description="Run the Larvis hand comparison API")
    parser.add_argument(
        "--host",
        type=str,
        default="127.0.0.1",
        help="Host to bind to (default: 127.0.0.1)",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8000,
        help="Port to bind to (default: 8000)",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development",
    )

    args = parser.parse_args()

    print(f"Starting Larvis API on http://{args.host}:{args.port}")
    print("Press Ctrl+C to stop\n")

    try:
        # Reload needs an import string rather than an app object
        uvicorn.run(
            "larvis.server.main:app",
            host=args.host,
            port=args.port,
            reload=args.reload,
        )
    except KeyboardInterrupt:
        print("\nServer stopped.")
        sys.exit(0)


if __name__ == "__main__":
    main()
