"""
config.py - Persistent Configuration

Stores the editor command in a JSON file under the user config directory.
A missing or malformed file falls back to defaults.
"""

from pathlib import Path
from typing import Dict
import json
import logging
import os

from platformdirs import user_config_dir

logger = logging.getLogger(__name__)

APP_NAME = "renamer"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME
DEFAULT_EDITOR = "vim"


def load_config() -> Dict[str, object]:
    """
    Load the persisted JSON config object

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    try:
        data = json.loads(CONFIG_PATH.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return {}
    except (OSError, ValueError) as e:
        logger.warning("Ignoring config file %s: %s", CONFIG_PATH, e)
        return {}
    return data if isinstance(data, dict) else {}


def save_config(data: Dict[str, object]) -> None:
    """Persist config data as pretty-printed JSON"""
    CONFIG_PATH.parent.mkdir(parents=True, exist_ok=True)
    CONFIG_PATH.write_text(json.dumps(data, indent=2) + "\n", encoding="utf-8")


def load_editor() -> str:
    """
    Return the editor command

    Precedence: config file, $VISUAL, $EDITOR, then vim.
    """
    value = load_config().get("editor")
    if isinstance(value, str) and value.strip():
        return value.strip()
    for var in ("VISUAL", "EDITOR"):
        env_value = os.environ.get(var, "").strip()
        if env_value:
            return env_value
    return DEFAULT_EDITOR


def save_editor(editor: str) -> Path:
    """Persist the editor command, returning the config file path"""
    config = load_config()
    config["editor"] = editor
    save_config(config)
    return CONFIG_PATH
