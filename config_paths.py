import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "fintrackr")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")
LOG_PATH = os.path.join(CONFIG_DIR, "fintrackr.log")

# default settings
DATA_PATH_DEFAULT = "transactions.json"
LOG_LEVEL_DEFAULT = "INFO"
CURSOR_BLINK_MS_DEFAULT = 150
POLL_INTERVAL_MS_DEFAULT = 100


def ensure_config_dirs():
    os.makedirs(CONFIG_DIR, exist_ok=True)


def _positive_number(value):
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return None
    return value if value > 0 else None


def load_config():
    cfg = {
        "DATA_PATH": DATA_PATH_DEFAULT,
        "LOG_LEVEL": LOG_LEVEL_DEFAULT,
        "CURSOR_BLINK_MS": CURSOR_BLINK_MS_DEFAULT,
        "POLL_INTERVAL_MS": POLL_INTERVAL_MS_DEFAULT,
    }

    if not os.path.exists(CONFIG_JSON):
        return cfg

    try:
        with open(CONFIG_JSON, "r", encoding="utf-8") as f:
            data = json.load(f)
    except (OSError, ValueError):
        return cfg
    if not isinstance(data, dict):
        return cfg

    data_path = data.get("data_path")
    if isinstance(data_path, str) and data_path.strip():
        cfg["DATA_PATH"] = os.path.expanduser(data_path.strip())

    log_level = data.get("log_level")
    if isinstance(log_level, str) and log_level.strip():
        cfg["LOG_LEVEL"] = log_level.strip().upper()

    blink = _positive_number(data.get("cursor_blink_ms"))
    if blink is not None:
        cfg["CURSOR_BLINK_MS"] = blink

    poll = _positive_number(data.get("poll_interval_ms"))
    if poll is not None:
        cfg["POLL_INTERVAL_MS"] = int(poll)

    return cfg
