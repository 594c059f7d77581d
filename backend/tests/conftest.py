"""Root conftest — shared test configuration and work item builders."""

import os

# Ensure tests never reach a real form service or database file
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("FORM_SERVICE_URL", "http://form-service.test")
os.environ.setdefault("LOG_FORMAT", "text")
