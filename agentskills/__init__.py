"""
agentskills - discovery and validation for agent plugins.

Plugins live under .github/plugins/{name}/ with a .claude-plugin/plugin.json
manifest plus any of commands/*.md, skills/{skill}/SKILL.md and agents/*.md.

Example:
    >>> from agentskills import discover_plugins, plugin_path, load_manifest
    >>> for name in discover_plugins("."):
    ...     manifest = load_manifest(plugin_path(".", name))
"""

from agentskills.core import (
    PluginFiles,
    ParsedMarkdown,
    collect_plugin_files,
    discover_files,
    discover_plugins,
    discover_skill_dirs,
    load_manifest,
    parse_frontmatter,
    plugin_path,
    validate_all,
    validate_plugin,
)
from agentskills.models import PluginManifest, PluginReport, ValidationIssue

__version__ = "0.1.0"
__all__ = [
    "PluginFiles",
    "ParsedMarkdown",
    "PluginManifest",
    "PluginReport",
    "ValidationIssue",
    "collect_plugin_files",
    "discover_files",
    "discover_plugins",
    "discover_skill_dirs",
    "load_manifest",
    "parse_frontmatter",
    "plugin_path",
    "validate_all",
    "validate_plugin",
]
