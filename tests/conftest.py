# tests/conftest.py
"""Point the app at a throwaway SQLite file before anything imports campus.database."""

import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

os.environ["DATABASE_URL"] = "sqlite:///./test_campus.db"
os.environ["CREATE_TABLES_ON_STARTUP"] = "0"
