# core/paths.py

import os
from pathlib import Path

# Project root (the directory holding main.py)
PROJECT_ROOT = Path(__file__).parent.parent.resolve()

# Base directory for all persistent data, overridable in tests
BASE_DATA_DIR = Path(os.getenv("DATA_DIR", "data"))

# Demo configuration
DEFAULT_CONFIG_PATH = PROJECT_ROOT / "config" / "demo_config.json"
DEFAULT_ENV_PATH = PROJECT_ROOT / "secrets" / ".env"

# Structured logging NDJSON file
STRUCT_LOG_NAME    = Path("logs") / "input_events.ndjson"
STRUCT_LOG_FILE    = BASE_DATA_DIR / STRUCT_LOG_NAME
