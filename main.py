#!/usr/bin/env python3
"""
StoryWeaver Application Entry Point
Checks the interpreter, dependencies and configuration, then starts the API server
"""

import os
import sys
import subprocess
from pathlib import Path


def check_python_version():
    """Check if Python version is supported"""
    if sys.version_info < (3, 9):
        print("❌ Python 3.9 or higher is required")
        print(f"Current version: {sys.version}")
        return False
    print(f"✅ Python version: {sys.version.split()[0]}")
    return True


def check_dependencies():
    """Check if required packages are available"""
    print("📦 Checking dependencies...")
    try:
        import fastapi
        import uvicorn
        import openai
        import httpx
        import pydantic
        import dotenv
        print("✅ All dependencies are available")
        return True
    except ImportError as e:
        print(f"❌ Missing dependency: {e}")
        print("Please install dependencies with: pip install -e .")
        return False


def check_environment():
    """Check if the completion service settings are configured"""
    env_file = Path(".env")
    if not env_file.exists():
        print("⚠️  .env file not found, using process environment only")

    from storyweaver.config import Settings
    from storyweaver.exceptions import ConfigurationError

    try:
        settings = Settings.from_env()
    except ConfigurationError as e:
        print(f"❌ {e}")
        print("Please set GAIA_API_KEY (and optionally GAIA_API_ENDPOINT, GAIA_API_MODEL) in your .env file")
        return False

    if "your_" in settings.api_key.lower():
        print("❌ GAIA_API_KEY still holds the placeholder value from .env.example")
        return False

    print(f"✅ Completion endpoint: {settings.api_endpoint}")
    print(f"✅ Model: {settings.model} (timeout {settings.request_timeout:g}s)")
    return True


def start_application():
    """Start the FastAPI application"""
    port = int(os.getenv("PORT", 8000))

    print(f"\n🚀 Starting StoryWeaver...")
    print(f"📱 API will be available at: http://localhost:{port}/docs")
    print("Press Ctrl+C to stop the server\n")

    try:
        subprocess.run([
            sys.executable, "-m", "uvicorn",
            "storyweaver.main:app",
            "--host", "0.0.0.0",
            "--port", str(port),
            "--reload"
        ])
    except KeyboardInterrupt:
        print("\n👋 Application stopped")
    except FileNotFoundError:
        print("❌ uvicorn not found. Please install dependencies first.")
        return False

    return True


def main():
    """Main function"""
    print("🎨 StoryWeaver - AI Story Generator")
    print("=" * 50)

    if not check_python_version():
        return 1

    if not check_dependencies():
        return 1

    if not check_environment():
        print("\n💡 To get started:")
        print("1. Copy .env.example to .env")
        print("2. Fill in your completion service credentials")
        print("3. Run this script again")
        return 1

    success = start_application()
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
