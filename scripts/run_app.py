#!/usr/bin/env python3
"""Launch the news desk backend and the Streamlit front page together.

This script handles:
- Warning when NEWS_API_KEY is missing (the page then shows built-in stories)
- Starting the FastAPI backend
- Starting the Streamlit frontend once the backend answers /health
- Graceful shutdown of both services
"""

from __future__ import annotations

import argparse
import os
import subprocess
import sys
import time
from pathlib import Path
from typing import Sequence

import httpx

ROOT_DIR = Path(__file__).resolve().parents[1]
STREAMLIT_APP = ROOT_DIR / "src" / "news_desk" / "ui" / "streamlit_app.py"
UVICORN_APP = "news_desk.api.server:app"


def check_api_key() -> bool:
    """Return True when a NewsAPI key is available in the environment or .env."""

    if os.environ.get("NEWS_API_KEY"):
        return True
    env_file = ROOT_DIR / ".env"
    if env_file.exists() and "NEWS_API_KEY=" in env_file.read_text(encoding="utf-8"):
        return True
    print("[env] WARNING: NEWS_API_KEY is not set; the page will serve built-in stories.")
    return False


def start_process(label: str, command: Sequence[str], env: dict[str, str]) -> subprocess.Popen:
    """Launch a child process and return the handle."""

    print(f"[{label}] {' '.join(command)}")
    return subprocess.Popen(  # noqa: S603 - command constructed above
        command,
        cwd=ROOT_DIR,
        env=env,
    )


def wait_for_backend(base_url: str, timeout: float) -> bool:
    """Poll the backend health endpoint until it responds or timeout occurs."""

    health_url = f"{base_url.rstrip('/')}/health"
    deadline = time.time() + timeout
    print(f"[backend] Waiting for health check at {health_url} ...")
    while time.time() < deadline:
        try:
            httpx.get(health_url, timeout=3.0).raise_for_status()
            print("[backend] Health check succeeded.")
            return True
        except httpx.HTTPError:
            time.sleep(1.0)
    print("[backend] Health check timed out. The front page may show errors until it is up.")
    return False


def shutdown_process(proc: subprocess.Popen | None, label: str) -> None:
    if proc is None or proc.poll() is not None:
        return

    print(f"[{label}] Stopping...")
    proc.terminate()
    try:
        proc.wait(timeout=10)
    except subprocess.TimeoutExpired:
        print(f"[{label}] Terminate timed out. Killing...")
        proc.kill()


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Start the news desk FastAPI backend and Streamlit front page together."
    )
    parser.add_argument("--backend-host", default="127.0.0.1", help="Host for the FastAPI server.")
    parser.add_argument("--backend-port", type=int, default=8000, help="Port for the FastAPI server.")
    parser.add_argument("--frontend-port", type=int, default=8501, help="Port for the Streamlit app.")
    parser.add_argument(
        "--backend-startup-timeout",
        type=float,
        default=30.0,
        help="Seconds to wait for the backend health endpoint before continuing.",
    )
    parser.add_argument("--no-reload", action="store_true", help="Disable uvicorn auto-reload.")
    parser.add_argument("--backend-only", action="store_true", help="Serve the HTML page without Streamlit.")
    return parser.parse_args()


def main() -> int:
    args = parse_args()
    check_api_key()

    backend_base_url = f"http://{args.backend_host}:{args.backend_port}"
    env = os.environ.copy()
    env.setdefault("NEWS_DESK_API_BASE_URL", backend_base_url)

    backend_cmd = [
        sys.executable,
        "-m",
        "uvicorn",
        UVICORN_APP,
        "--host",
        args.backend_host,
        "--port",
        str(args.backend_port),
    ]
    if not args.no_reload:
        backend_cmd.append("--reload")

    frontend_cmd = [
        sys.executable,
        "-m",
        "streamlit",
        "run",
        str(STREAMLIT_APP),
        "--server.port",
        str(args.frontend_port),
    ]

    backend_proc = frontend_proc = None
    try:
        backend_proc = start_process("backend", backend_cmd, env)
        wait_for_backend(backend_base_url, args.backend_startup_timeout)
        if not args.backend_only:
            frontend_proc = start_process("frontend", frontend_cmd, env)

        print("[runner] Services are running. Press Ctrl+C to stop.")
        print(f"[runner] Front page (HTML): {backend_base_url}/")
        if frontend_proc is not None:
            print(f"[runner] Front page (Streamlit): http://localhost:{args.frontend_port}")

        while True:
            if backend_proc.poll() is not None:
                print(f"[backend] exited with status {backend_proc.returncode}.")
                break
            if frontend_proc is not None and frontend_proc.poll() is not None:
                print(f"[frontend] exited with status {frontend_proc.returncode}.")
                break
            time.sleep(0.5)
    except KeyboardInterrupt:
        print("\n[runner] Caught KeyboardInterrupt. Shutting down...")
    finally:
        shutdown_process(frontend_proc, "frontend")
        shutdown_process(backend_proc, "backend")

    return 0


if __name__ == "__main__":
    raise SystemExit(main())
