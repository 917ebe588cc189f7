#!/usr/bin/env python3
"""
Development startup script.

Runs the storefront with auto-reload after a few pre-flight checks.
"""

import os
import sys
import shutil
import subprocess
from pathlib import Path

# Project root
PROJECT_ROOT = Path(__file__).parent.parent


def check_dependencies():
    """Check if required dependencies are installed."""
    try:
        import fastapi
        import uvicorn
        import sqlalchemy
        import pydantic_settings
        print("✓ All core dependencies installed")
        return True
    except ImportError as e:
        print(f"✗ Missing dependency: {e.name}")
        print("\nRun: pip install -e .")
        return False


def check_env():
    """Check if .env file exists, creating it from the example if needed."""
    env_file = PROJECT_ROOT / "config" / ".env"
    env_example = PROJECT_ROOT / "config" / ".env.example"

    if env_file.exists():
        print("✓ Configuration file found")
        return True
    elif env_example.exists():
        print("! Configuration file not found, copying from example...")
        shutil.copy(env_example, env_file)
        print("✓ Created config/.env from example")
        return True
    else:
        print("! No configuration file found, using defaults")
        return True


def read_port() -> str:
    """Port from the environment, falling back to the app default."""
    return os.environ.get("PORT", "5000")


def start_service():
    """Start the storefront in development mode."""
    port = read_port()
    print(f"\n🛒 Starting Storefront on http://localhost:{port} ...")
    print(f"📍 Storefront:   http://localhost:{port}")
    print(f"📍 Products API: http://localhost:{port}/api/products")
    print(f"📍 API docs:     http://localhost:{port}/docs")
    print("\nPress Ctrl+C to stop")

    process = subprocess.Popen(
        [
            sys.executable, "-m", "uvicorn",
            "storefront.main:app",
            "--reload",
            "--host", "0.0.0.0",
            "--port", port,
        ],
        cwd=PROJECT_ROOT,
    )

    try:
        process.wait()
    except KeyboardInterrupt:
        print("\n\nShutting down...")
        process.terminate()
        process.wait()
        print("Storefront stopped.")


def main():
    print("=" * 60)
    print("Storefront - Development Server")
    print("=" * 60)

    print("\nRunning pre-flight checks...")

    if not check_dependencies():
        sys.exit(1)

    check_env()

    print("\n✓ All checks passed!")

    start_service()


if __name__ == "__main__":
    main()
