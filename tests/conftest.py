"""Shared test configuration.

Points the application at an in-memory SQLite database before any
application module reads its settings.
"""

import os

os.environ["DATABASE_URL"] = "sqlite+aiosqlite://"
os.environ["CREATE_TABLES"] = "true"
os.environ["ENABLE_DEBUG_ROUTES"] = "true"
os.environ.setdefault("LOG_JSON", "false")
os.environ.setdefault("LOG_LEVEL", "WARNING")
