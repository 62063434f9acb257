"""Pre-DB bootstrap configuration. Zero imports from the rest of the app.

Stores preferences that must be known before the ledger store is opened
(data folder, storage backend, log level). Config lives in
~/.budget_tracker/config.json to avoid a bootstrapping problem.
"""
import json
import os
from pathlib import Path

CONFIG_DIR = Path.home() / ".budget_tracker"
CONFIG_FILE = CONFIG_DIR / "config.json"

STORAGE_BACKENDS = ("sqlite", "json")


def load_config() -> dict:
    """Returns {} on missing or corrupt file — never raises."""
    try:
        with open(CONFIG_FILE, "r", encoding="utf-8") as f:
            config = json.load(f)
    except (OSError, ValueError):
        return {}
    return config if isinstance(config, dict) else {}


def save_config(config: dict) -> None:
    """Creates ~/.budget_tracker/ if needed; atomic write via .tmp + os.replace()."""
    CONFIG_DIR.mkdir(parents=True, exist_ok=True)
    tmp = CONFIG_FILE.with_suffix(".tmp")
    try:
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(config, f, indent=2)
        os.replace(tmp, CONFIG_FILE)
    except OSError:
        tmp.unlink(missing_ok=True)
        raise


def get_data_folder() -> str | None:
    """Return config["data_folder"] or None if not set."""
    return load_config().get("data_folder")


def set_data_folder(path: str | None) -> None:
    config = load_config()
    if path is None:
        config.pop("data_folder", None)
    else:
        config["data_folder"] = path
    save_config(config)


def get_storage_backend() -> str:
    """'sqlite' (default) or 'json'; unknown values fall back to 'sqlite'."""
    backend = load_config().get("storage_backend", "sqlite")
    return backend if backend in STORAGE_BACKENDS else "sqlite"


def get_log_level() -> str | None:
    return load_config().get("log_level")
