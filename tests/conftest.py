"""Pytest configuration shared by every test module."""

import os
from pathlib import Path

# Configuration is read when src.users_service.runtime.context is first imported
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("TEST_DATABASE_URL", "sqlite://")
os.environ.setdefault("TEST_LOG_FILE", "")
os.environ.setdefault(
    "APP_CONFIG_FILE", str(Path(__file__).resolve().parent.parent / "config.yaml")
)

from tests.fixtures import *  # noqa: E402,F401,F403
