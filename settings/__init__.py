"""Application settings."""

import os
from pathlib import Path

# API
API_BASE_URL = os.getenv("LAUNCHPAD_API_BASE_URL", "http://localhost:8000")
API_TIMEOUT = 30

# Sales endpoints still authenticate with one shared password until per-user
# sales auth exists on the backend. Never commit the value.
SALES_SHARED_PASSWORD = os.getenv("LAUNCHPAD_SALES_PASSWORD")

# Older admin backends also read the token from a `password` query param
ADMIN_LEGACY_PASSWORD_PARAM = os.getenv("LAUNCHPAD_ADMIN_LEGACY_PASSWORD_PARAM", "0") == "1"

# Session storage
STORAGE_PATH = os.getenv("LAUNCHPAD_STORAGE_PATH", "launchpad_storage.duckdb")

# Query cache
QUERY_STALE_TIME = float(os.getenv("LAUNCHPAD_QUERY_STALE_TIME", "60"))

# Logging
LOG_DIR = Path(os.getenv("LAUNCHPAD_LOG_DIR", "logs"))
LOG_LEVEL = os.getenv("LAUNCHPAD_LOG_LEVEL", "INFO")
