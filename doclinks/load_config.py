"""Logic for loading link resolution settings."""

import copy
from pathlib import Path
from typing import Any

import yaml

from doclinks.deep_merge import deep_merge

DEFAULT_CONFIG: dict[str, Any] = {
    "templates": {
        "monospace_links": False,
        "clever_links": False,
    },
    # None keeps public, protected and undocumented-access symbols
    "access": None,
    "private": False,
    "file_extension": ".html",
    "path_roots": ["esri"],
    "namespaces": ["event", "external", "module"],
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
