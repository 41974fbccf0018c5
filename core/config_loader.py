# core/config_loader.py

import json
import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

from core.config_schema import DemoConfig
from core.paths import DEFAULT_CONFIG_PATH, DEFAULT_ENV_PATH, STRUCT_LOG_NAME

FALSY = {"0", "false", "no", "off"}


def load_environment():
    if DEFAULT_ENV_PATH.exists():
        load_dotenv(dotenv_path=DEFAULT_ENV_PATH)
    else:
        load_dotenv()


def load_raw_config(path: Path) -> dict:
    if not path.exists():
        raise FileNotFoundError(f"Config file not found at {path.resolve()}")
    with open(path, "r", encoding="utf-8") as f:
        try:
            return json.load(f)
        except json.JSONDecodeError as e:
            raise RuntimeError(f"Config file {path} is not valid JSON: {e}") from e


def load_config(path: Optional[Path] = None) -> DemoConfig:
    """
    Loads the demo configuration and validates it against DemoConfig.

    Resolution order: explicit `path`, then LINE_INPUT_CONFIG, then
    config/demo_config.json. Only the last one may be absent, in which case
    the schema defaults are used.
    """
    load_environment()

    explicit = path or os.getenv("LINE_INPUT_CONFIG")
    if explicit:
        raw = load_raw_config(Path(explicit))
    elif DEFAULT_CONFIG_PATH.exists():
        raw = load_raw_config(DEFAULT_CONFIG_PATH)
    else:
        raw = {}

    try:
        config = DemoConfig(**raw)
    except Exception as e:
        # Fail fast with clear message
        raise RuntimeError(f"Configuration validation failed: {e}") from e

    if os.getenv("LINE_INPUT_EVENT_LOG", "").strip().lower() in FALSY:
        config = config.model_copy(update={"event_log": False})
    return config


def load_env_variables() -> dict:
    """
    Loads the runtime environment into a plain dict.
    """
    load_environment()

    data_dir = os.getenv("DATA_DIR", "data").strip()
    log_file = os.getenv("LINE_INPUT_LOG_FILE", "").strip()
    return {
        "DATA_DIR": data_dir,
        "LINE_INPUT_EVENT_LOG": os.getenv("LINE_INPUT_EVENT_LOG", "1").strip(),
        "LOG_FILE": Path(log_file) if log_file else Path(data_dir) / STRUCT_LOG_NAME,
    }
