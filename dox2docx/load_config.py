"""Logic for loading and merging configuration files."""

import copy
from pathlib import Path
from typing import Any

import yaml

from dox2docx.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "document": {
        "title": "API Reference",
        "template": None,
    },
    "fonts": {
        "code": "Consolas",
        "code_size": 9,
    },
    "styles": {
        "bullet_list": "List Bullet",
        "number_list": "List Number",
        "table": "Table Grid",
    },
    "warning": {
        "label": "Warning:",
        "color": "C00000",
    },
}


def load_config(path: str | None = None) -> dict[str, Any]:
    """Load configuration from a YAML file and merge it with defaults."""
    config = copy.deepcopy(DEFAULT_CONFIG)
    if path:
        p = Path(path)
        if p.exists():
            user_config = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
            config = deep_merge(config, user_config)
    return config
