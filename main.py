"""Palbox: dev launcher. Starts the API server in watch mode."""

import argparse
import asyncio
import os
import signal
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

ROOT = Path(__file__).parent
load_dotenv(ROOT / ".env")

HOST = os.getenv("HOST", "0.0.0.0")
BACKEND_PORT = os.getenv("BACKEND_PORT", "13013")


def main():
    parser = argparse.ArgumentParser(description="Palbox dev launcher")
    parser.add_argument("--store", choices=["firebase", "file", "memory"], default=None,
                        help="Store backend (default: STORE_BACKEND or file)")
    parser.add_argument("--data-dir", type=Path, default=None,
                        help="Data directory for the file store (default: ./data)")
    parser.add_argument("--host", default=HOST, help="Interface to bind")
    parser.add_argument("--port", default=BACKEND_PORT, help="API port")
    parser.add_argument("--demo", action="store_true",
                        help="Overwrite the store with demo catalog and pals")
    args = parser.parse_args()

    # Build env for the server so it picks up the same store settings
    env = os.environ.copy()
    if args.store:
        env["STORE_BACKEND"] = args.store
    if args.data_dir:
        env["DATA_DIR"] = str(args.data_dir.resolve())

    if args.demo:
        if env.get("STORE_BACKEND") == "memory":
            print("--demo has no effect with the memory store (it lives in the server process)")
        else:
            os.environ.update(env)
            from backend.config import build_gateway, load_settings
            from backend.demo import create_demo_data
            counts = asyncio.run(create_demo_data(build_gateway(load_settings())))
            print(f"Demo data written: {counts}")

    proc = None

    def shutdown(*_):
        print("\nShutting down...")
        if proc is not None:
            proc.terminate()
            proc.wait()
        sys.exit(0)

    signal.signal(signal.SIGINT, shutdown)
    signal.signal(signal.SIGTERM, shutdown)

    print(f"Starting API on http://{args.host}:{args.port} ...")
    proc = subprocess.Popen(
        ["uv", "run", "uvicorn", "backend.app:app", "--reload", "--host", args.host, "--port", args.port],
        cwd=ROOT, env=env,
    )
    proc.wait()


if __name__ == "__main__":
    main()
