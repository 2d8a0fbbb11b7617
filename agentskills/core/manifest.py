"""
Plugin manifest loading.

Reads {plugin}/.claude-plugin/plugin.json as-is. Whether the required fields
are present is a question for the validation layer, not the loader.
"""

import json
import logging
from pathlib import Path
from typing import Any, Union

from agentskills.models.plugin import PluginManifest

logger = logging.getLogger(__name__)

MANIFEST_DIR = ".claude-plugin"
MANIFEST_FILE = "plugin.json"


def manifest_path(plugin_dir: Union[str, Path]) -> Path:
    return Path(plugin_dir) / MANIFEST_DIR / MANIFEST_FILE


def load_manifest_data(plugin_dir: Union[str, Path]) -> dict[str, Any]:
    """Read and decode plugin.json.

    Raises:
        FileNotFoundError: the manifest does not exist
        json.JSONDecodeError: the manifest is not valid JSON
        ValueError: the manifest is valid JSON but not an object
    """
    path = manifest_path(plugin_dir)
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, dict):
        raise ValueError(
            f"Plugin manifest must be a JSON object, got {type(data).__name__}: {path}"
        )
    return data


def load_manifest(plugin_dir: Union[str, Path]) -> PluginManifest:
    """Load a plugin manifest without checking required fields."""
    data = load_manifest_data(plugin_dir)
    manifest = PluginManifest.model_construct(**data)
    logger.debug(f"Loaded manifest for {Path(plugin_dir).name}: {manifest.name!r}")
    return manifest
