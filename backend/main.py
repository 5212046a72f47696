"""
Entry point for the Snake HTTP server.

Usage:
    python main.py [PORT] [--host HOST] [--debug]
"""

import argparse
import logging
import os
from typing import List, Optional

from dotenv import load_dotenv

DEFAULT_PORT = 8080
DEFAULT_HOST = "127.0.0.1"


def parse_port(value: Optional[str]) -> int:
    """Parse a port number, falling back to the default when it is not usable."""
    if value is None:
        return DEFAULT_PORT
    try:
        port = int(value)
    except ValueError:
        logging.warning(f"Invalid port {value!r}, using {DEFAULT_PORT}")
        return DEFAULT_PORT
    if not 0 < port < 65536:
        logging.warning(f"Port {port} out of range, using {DEFAULT_PORT}")
        return DEFAULT_PORT
    return port


def env_flag(name: str) -> bool:
    """Read a boolean environment variable. Only 1/true/yes/on count as set."""
    return os.getenv(name, "").strip().lower() in ("1", "true", "yes", "on")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Run the Snake game server."
    )
    parser.add_argument("port", nargs="?", default=os.getenv("PORT"),
                        help=f"Port to listen on (default: $PORT or {DEFAULT_PORT})")
    parser.add_argument("--host", type=str, default=os.getenv("HOST", DEFAULT_HOST),
                        help=f"Interface to bind (default: $HOST or {DEFAULT_HOST})")
    parser.add_argument("--debug", action="store_true",
                        default=env_flag("FLASK_DEBUG"),
                        help="Run Flask in debug mode")
    return parser


def main(argv: Optional[List[str]] = None):
    load_dotenv()
    logging.basicConfig(level=logging.INFO)

    args = build_parser().parse_args(argv)
    port = parse_port(args.port)

    # Imported here so .env is loaded before the app reads its settings
    from app import app

    logging.info(f"Starting server on {args.host}:{port}")
    app.run(host=args.host, port=port, debug=args.debug, threaded=True)


if __name__ == "__main__":
    main()
