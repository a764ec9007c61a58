import json
import os

HOME = os.path.expanduser("~")
XDG_CONFIG_HOME = os.environ.get("XDG_CONFIG_HOME")
CONFIG_HOME = XDG_CONFIG_HOME if XDG_CONFIG_HOME else os.path.join(HOME, ".config")
CONFIG_DIR = os.path.join(CONFIG_HOME, "tabtxt")
CONFIG_JSON = os.path.join(CONFIG_DIR, "config.json")

# default settings
TAB_SIZE_DEFAULT = 8
UNDO_MAX_DEPTH_DEFAULT = 50
STATUS_SECONDS_DEFAULT = 3


def _positive_int(value):
    if isinstance(value, bool) or not isinstance(value, int):
        return None
    return value if value >= 1 else None


def load_config():
    cfg = {
        "TAB_SIZE": TAB_SIZE_DEFAULT,
        "UNDO_MAX_DEPTH": UNDO_MAX_DEPTH_DEFAULT,
        "STATUS_SECONDS": STATUS_SECONDS_DEFAULT,
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

    tab_size = _positive_int(data.get("tab_size"))
    if tab_size is not None:
        cfg["TAB_SIZE"] = tab_size

    depth = _positive_int(data.get("undo_max_depth"))
    if depth is not None:
        cfg["UNDO_MAX_DEPTH"] = depth

    secs = data.get("status_seconds")
    if isinstance(secs, (int, float)) and not isinstance(secs, bool) and secs > 0:
        cfg["STATUS_SECONDS"] = secs

    return cfg
