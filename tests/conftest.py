"""Root conftest — shared test configuration."""

import os

# Ensure tests never touch a developer's real database file
os.environ.setdefault("RENTSTORE_DATABASE_URL", "sqlite://")
os.environ.setdefault("RENTSTORE_LOG_FORMAT", "text")
