"""
Run the Starter API with auto-reload for local development.

Reads DATABASE_URL, API_PREFIX and LOG_LEVEL from .env, so the printed
URLs and uvicorn's log level follow the same settings as the app.

Usage:
    python scripts/run_dev.py [port]
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

import uvicorn

from starter_api.core.config import settings

if __name__ == "__main__":
    port = int(sys.argv[1]) if len(sys.argv) > 1 else 8000

    print("=" * 60)
    print(f"{settings.PROJECT_NAME} {settings.VERSION} (development)")
    print("=" * 60)
    print()
    print(f"Users: http://localhost:{port}{settings.API_PREFIX}/users")
    print(f"Health: http://localhost:{port}{settings.API_PREFIX}/health")
    print(f"Docs: http://localhost:{port}/docs")
    print()
    print("Press Ctrl+C to stop")
    print("=" * 60)

    uvicorn.run("starter_api.main:app", host="0.0.0.0", port=port, reload=True, log_level=settings.LOG_LEVEL.lower())
