"""Test configuration shared by the unit and integration suites."""

import os

# Must be set before the application configuration is first loaded
os.environ.setdefault("APP_ENVIRONMENT", "test")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("LOG_FILE", "")

from tests.fixtures import *  # noqa: E402,F401,F403
