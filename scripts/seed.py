"""
Database seed script.

Inserts sample users, posts and comments. Safe to run repeatedly.

Usage:
    python scripts/seed.py
"""

import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

# Load .env file
from dotenv import load_dotenv

load_dotenv()

from sqlmodel import Session

from starter_api.core.config import settings
from starter_api.core.logging import setup_logging
from starter_api.db.seed import seed
from starter_api.db.session import engine

if __name__ == "__main__":
    setup_logging(settings.LOG_LEVEL)
    print("Starting database seed...")

    try:
        with Session(engine) as session:
            counts = seed(session)
    except Exception as e:
        print(f"ERROR: Seeding failed: {e}")
        sys.exit(1)

    print(f"Users: {counts['users']}, posts: {counts['posts']}, comments: {counts['comments']}")
    print("Database seeded successfully!")
