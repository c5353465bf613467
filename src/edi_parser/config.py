import os
from pathlib import Path

import yaml

CONFIG_PATH = Path(__file__).resolve().parents[2] / "config" / "edi_parser.yml"
CONFIG_ENV_VAR = "EDI_PARSER_CONFIG"


class EPConfig:
    def __init__(self, data):
        self.paths = data.get("paths", {}) or {}
        self.logging = data.get("logging", {}) or {}
        self.separators = data.get("separators", {}) or {}
        self.debug = data.get("debug", False)

    def separator_preset(self, name=None) -> dict:
        """Return the raw field mapping of a named separator preset."""
        presets = self.separators.get("presets", {}) or {}
        preset_name = name or self.separators.get("default", "edifact")
        if preset_name not in presets:
            raise KeyError(f"Unknown separator preset: {preset_name}")
        return dict(presets[preset_name])


def config_path() -> Path:
    override = os.environ.get(CONFIG_ENV_VAR)
    return Path(override) if override else CONFIG_PATH


def load_config() -> 'EPConfig':
    path = config_path()
    # A missing file means "all defaults"; the package stays importable
    # from a wheel that does not ship config/.
    if not path.exists():
        return EPConfig({})

    with open(path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f) or {}

    return EPConfig(data)

_config_cache = None

def get_config() -> 'EPConfig':
    global _config_cache
    if _config_cache is None:
        _config_cache = load_config()
    return _config_cache


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_cache
    _config_cache = None
