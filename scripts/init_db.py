#!/usr/bin/env python3
"""
Standalone database initialization script.
Creates the users and meals tables on the configured DATABASE_URL.
"""

import sys
import os
import logging

# Ensure we're using the right Python path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.insert(0, project_root)

from app.config import settings
from domain.models import init_database

logger = logging.getLogger("dietlog.scripts.init_db")


def main() -> int:
    logging.basicConfig(level=logging.INFO, format=settings.log_format)
    try:
        init_database()
    except Exception:
        logger.exception("Database initialization failed")
        return 1
    return 0


if __name__ == "__main__":
    print("\n" + "=" * 60)
    print("DietLog Database Initialization")
    print("=" * 60 + "\n")

    exit_code = main()

    if exit_code == 0:
        print("\nSUCCESS! Tables 'users' and 'meals' are ready.\n")
    else:
        print("\nFAILED! Check the errors above.\n")

    sys.exit(exit_code)
