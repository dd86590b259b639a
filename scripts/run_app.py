#!/usr/bin/env python3
"""Load the environment and serve the news cache API with uvicorn.

This script handles:
- Loading variables from an env file (``.env`` by default)
- Warning about missing upstream credentials
- Starting the FastAPI app on the configured host and port
"""

from __future__ import annotations

import argparse
import os
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

ROOT_DIR = Path(__file__).resolve().parents[1]
UVICORN_APP = "news_cache.api.server:app"


def load_env(env_file: Path) -> None:
    if env_file.exists():
        load_dotenv(env_file)
        print(f"[env] Loaded environment from {env_file}")
    else:
        print(f"[env] No env file at {env_file}; using process environment.")


def check_env_vars() -> list[str]:
    """Return the required environment variables that are not set."""
    required = ["GNEWS_API_KEY"]
    missing = [var for var in required if not os.environ.get(var)]
    if missing:
        print(f"[env] WARNING: Missing required environment variables: {', '.join(missing)}")
        print("[env] Requests will fail until these are set.")
    return missing


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the cached news search API.")
    parser.add_argument(
        "--env-file",
        type=Path,
        default=ROOT_DIR / ".env",
        help="Environment file to load before starting (default: ./.env).",
    )
    parser.add_argument(
        "--host",
        default=None,
        help="Host/interface to bind (default: HOST or 0.0.0.0).",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to listen on (default: PORT or 8080).",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable uvicorn auto-reload.",
    )
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    load_env(args.env_file)
    check_env_vars()

    # Settings are read after the env file is loaded.
    from news_cache.config import Settings

    config = Settings()
    host = args.host or config.host
    port = args.port or config.port

    print(f"[server] Listening on http://{host}:{port}")
    uvicorn.run(UVICORN_APP, host=host, port=port, reload=args.reload, log_level=config.log_level.lower())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
