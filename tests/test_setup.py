# tests/test_setup.py
"""Tests for logging setup and the table bootstrap script."""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))
sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "scripts", "setup"))

import logging
from logging.handlers import RotatingFileHandler
from sqlalchemy import create_engine
from campus.config import settings
from campus.database import Base
from campus.utils.logger import get_logger, log_file_path
import init_db


class TestLogger:
    def test_named_logger(self):
        assert get_logger("campus.test").name == "campus.test"

    def test_file_handler_uses_settings(self):
        get_logger(__name__)
        files = [h.baseFilename for h in logging.getLogger().handlers
                 if isinstance(h, RotatingFileHandler)]
        assert os.path.abspath(log_file_path()) in files
        assert log_file_path().endswith(settings.LOG_FILE)

    def test_handlers_added_once(self):
        get_logger("a")
        count = len(logging.getLogger().handlers)
        get_logger("b")
        assert len(logging.getLogger().handlers) == count


class TestInitDb:
    def test_missing_tables_before_and_after_create(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'init.db'}")
        assert init_db.missing_tables(engine) == sorted(Base.metadata.tables)
        Base.metadata.create_all(bind=engine)
        assert init_db.missing_tables(engine) == []

    def test_can_connect(self, tmp_path):
        engine = create_engine(f"sqlite:///{tmp_path / 'ok.db'}")
        assert init_db.can_connect(engine) is True
