"""
Plugin discovery, loading and validation.
"""

from agentskills.core.discovery import (
    PLUGINS_DIR,
    PluginFiles,
    collect_plugin_files,
    discover_files,
    discover_plugins,
    discover_skill_dirs,
    plugin_path,
)
from agentskills.core.frontmatter import (
    Frontmatter,
    ParsedMarkdown,
    parse_frontmatter,
    parse_frontmatter_text,
)
from agentskills.core.manifest import load_manifest, load_manifest_data
from agentskills.core.validation import validate_all, validate_plugin

__all__ = [
    # Discovery
    "PLUGINS_DIR",
    "PluginFiles",
    "collect_plugin_files",
    "discover_files",
    "discover_plugins",
    "discover_skill_dirs",
    "plugin_path",
    # Parsing
    "Frontmatter",
    "ParsedMarkdown",
    "parse_frontmatter",
    "parse_frontmatter_text",
    "load_manifest",
    "load_manifest_data",
    # Validation
    "validate_all",
    "validate_plugin",
]
