"""Settings file I/O for studio-utilities.

Manages a JSON settings file at XDG_CONFIG_HOME/studio-utilities/settings.json.
The dashboard's category selection is never written here; it lives and dies
with one dashboard instance.

Import as: import studio_utilities.settings
"""

import json
import os
import tempfile
from pathlib import Path
from typing import Optional

import studio_utilities.aggregation
import studio_utilities.launcher

DEFAULT_STUDIO_URL = "http://localhost:3333"

# [LAW:one-source-of-truth] Help links shown in the dashboard footer section.
HELP_LINK_KEYS = ("docs_url", "support_url", "issues_url")


def get_config_path() -> Path:
    """Return path to settings file.

    Uses XDG_CONFIG_HOME (default ~/.config) / studio-utilities / settings.json.
    """
    config_home = os.environ.get("XDG_CONFIG_HOME", os.path.expanduser("~/.config"))
    return Path(config_home) / "studio-utilities" / "settings.json"


def load_settings() -> dict:
    """Load settings from JSON file. Returns empty dict on missing/corrupt file."""
    path = get_config_path()
    # [LAW:dataflow-not-control-flow] Always attempt read; empty dict is the "no data" value.
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (FileNotFoundError, json.JSONDecodeError, OSError):
        return {}
    return data if isinstance(data, dict) else {}


def save_settings(data: dict) -> None:
    """Atomic write of settings dict to JSON file.

    Creates parent directories if needed. Writes to temp file then renames
    to avoid partial writes on crash.
    """
    path = get_config_path()
    path.parent.mkdir(parents=True, exist_ok=True)
    fd, tmp_path = tempfile.mkstemp(dir=path.parent, suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
            f.write("\n")
        os.replace(tmp_path, path)
    except Exception:
        try:
            os.unlink(tmp_path)
        except OSError:
            pass
        raise


def load_setting(key: str, default=None):
    """Load a single setting by key. Returns default if absent."""
    return load_settings().get(key, default)


def save_setting(key: str, value) -> None:
    """Save a single setting by key (merge into existing settings)."""
    data = load_settings()
    data[key] = value
    save_settings(data)


def load_studio_url() -> str:
    """Studio base URL. STUDIO_UTILITIES_URL wins over the settings file."""
    env_value = os.environ.get("STUDIO_UTILITIES_URL", "").strip()
    if env_value:
        return env_value
    value = str(load_setting("studio_url", "") or "").strip()
    return value or DEFAULT_STUDIO_URL


def load_desk_path() -> str:
    value = str(load_setting("desk_path", "") or "").strip()
    if not value.startswith("/"):
        return studio_utilities.launcher.DEFAULT_BASE_PATH
    return value


def load_utility_packages() -> tuple[studio_utilities.aggregation.PackageSource, ...]:
    return studio_utilities.aggregation.parse_package_sources(load_setting("utility_packages"))


def load_help_links() -> dict[str, str]:
    """Configured help URLs; unset links map to an empty string."""
    data = load_settings()
    return {key: str(data.get(key, "") or "").strip() for key in HELP_LINK_KEYS}

