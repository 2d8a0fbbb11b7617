"""
Plugin validation.

Kept apart from loading and parsing: the loaders deserialize whatever is on
disk, and this module decides whether that is a well-formed plugin. Every
check returns findings instead of raising, so a single run can report all the
problems in a repository. Parse failures of individual files are turned into
findings here and nowhere else.
"""

import json
import logging
import re
from pathlib import Path
from typing import Any, Iterable, Optional, Union

import yaml

from agentskills.core.discovery import (
    MARKDOWN_EXT,
    SKILL_FILE,
    PluginFiles,
    collect_plugin_files,
    discover_plugins,
    plugin_path,
)
from agentskills.core.frontmatter import Frontmatter, parse_frontmatter
from agentskills.core.manifest import MANIFEST_DIR, MANIFEST_FILE, load_manifest_data
from agentskills.models.plugin import PluginReport, Severity, ValidationIssue

logger = logging.getLogger(__name__)

MANIFEST_REL_PATH = f"{MANIFEST_DIR}/{MANIFEST_FILE}"

REQUIRED_MANIFEST_FIELDS = ("name", "description", "version")
OPTIONAL_STRING_FIELDS = ("homepage", "repository", "license")
REQUIRED_FRONTMATTER_FIELDS = ("name", "description")

# Frontmatter keys through which an entity points at other entities
REFERENCE_KEYS = {
    "skill": "skills",
    "skills": "skills",
    "agent": "agents",
    "agents": "agents",
}

_SEMVER_PATTERN = re.compile(
    r"^(0|[1-9]\d*)\.(0|[1-9]\d*)\.(0|[1-9]\d*)"
    r"(?:-[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?"
    r"(?:\+[0-9A-Za-z-]+(?:\.[0-9A-Za-z-]+)*)?$"
)


def _is_non_empty_string(value: Any) -> bool:
    return isinstance(value, str) and bool(value.strip())


def validate_manifest_data(data: dict[str, Any], plugin_name: str) -> list[str]:
    """Check a decoded plugin.json against the manifest rules."""
    errors: list[str] = []

    for key in REQUIRED_MANIFEST_FIELDS:
        if key not in data:
            errors.append(f"Missing required field: {key}")
        elif not _is_non_empty_string(data[key]):
            errors.append(f"Field '{key}' must be a non-empty string")

    name = data.get("name")
    if _is_non_empty_string(name) and name != plugin_name:
        errors.append(f"Manifest name '{name}' must match directory name '{plugin_name}'")

    version = data.get("version")
    if _is_non_empty_string(version) and not _SEMVER_PATTERN.match(version):
        errors.append(f"Version '{version}' is not a semantic version (MAJOR.MINOR.PATCH)")

    if "author" in data:
        author = data["author"]
        if not isinstance(author, dict):
            errors.append("Field 'author' must be an object")
        elif not _is_non_empty_string(author.get("name")):
            errors.append("Field 'author.name' must be a non-empty string")

    for key in OPTIONAL_STRING_FIELDS:
        if key in data and not isinstance(data[key], str):
            errors.append(f"Field '{key}' must be a string")

    return errors


def validate_manifest(plugin_dir: Union[str, Path], plugin_name: str) -> list[ValidationIssue]:
    """Load and check a plugin manifest, reporting load failures as issues."""

    def issue(message: str) -> ValidationIssue:
        return ValidationIssue(plugin=plugin_name, path=MANIFEST_REL_PATH, message=message)

    try:
        data = load_manifest_data(plugin_dir)
    except FileNotFoundError:
        return [issue("Missing required file")]
    except json.JSONDecodeError as e:
        return [issue(f"Invalid JSON: {e}")]
    except (ValueError, OSError) as e:
        return [issue(str(e))]

    return [issue(message) for message in validate_manifest_data(data, plugin_name)]


def validate_frontmatter(frontmatter: Frontmatter, expected_name: str, kind: str) -> list[str]:
    """Check the name/description contract for a command, skill or agent."""
    errors: list[str] = []

    if not frontmatter:
        return [f"Missing frontmatter in {kind} file"]

    for key in REQUIRED_FRONTMATTER_FIELDS:
        if key not in frontmatter:
            errors.append(f"Missing required field in frontmatter: {key}")
        elif not _is_non_empty_string(frontmatter[key]):
            errors.append(f"Field '{key}' must be a non-empty string")

    name = frontmatter.get("name")
    if _is_non_empty_string(name) and name != expected_name:
        source = "directory" if kind == "skill" else "file"
        errors.append(f"{kind.capitalize()} name '{name}' must match {source} name '{expected_name}'")

    return errors


def _as_names(value: Any) -> Optional[list[str]]:
    if isinstance(value, str):
        return [value]
    if isinstance(value, list) and all(isinstance(v, str) for v in value):
        return value
    return None


def validate_references(frontmatter: Frontmatter, files: PluginFiles) -> list[str]:
    """Check that skills/agents named in frontmatter exist in the plugin."""
    errors: list[str] = []

    for key, target in REFERENCE_KEYS.items():
        if key not in frontmatter:
            continue
        names = _as_names(frontmatter[key])
        if names is None:
            errors.append(f"Field '{key}' must be a string or a list of strings")
            continue
        available = getattr(files, target)
        for ref in names:
            if ref not in available:
                errors.append(f"Referenced {target[:-1]} '{ref}' does not exist in this plugin")

    return errors


def _entity_files(plugin_dir: Path, files: PluginFiles) -> Iterable[tuple[str, str, Path]]:
    """Yield (kind, name, path) for each discovered entity file."""
    for name in sorted(files.commands):
        yield "command", name, plugin_dir / "commands" / f"{name}{MARKDOWN_EXT}"
    for name in sorted(files.skills):
        yield "skill", name, plugin_dir / "skills" / name / SKILL_FILE
    for name in sorted(files.agents):
        yield "agent", name, plugin_dir / "agents" / f"{name}{MARKDOWN_EXT}"


def validate_plugin(base_path: Union[str, Path], plugin_name: str) -> PluginReport:
    """Run every check against one plugin."""
    plugin_dir = plugin_path(base_path, plugin_name)
    report = PluginReport(plugin=plugin_name, path=str(plugin_dir.resolve()))

    report.issues.extend(validate_manifest(plugin_dir, plugin_name))

    files = collect_plugin_files(plugin_dir)
    if files.is_empty:
        report.issues.append(
            ValidationIssue(
                severity=Severity.WARNING,
                plugin=plugin_name,
                message="Plugin has no commands, skills or agents",
            )
        )

    for kind, name, path in _entity_files(plugin_dir, files):
        rel_path = path.relative_to(plugin_dir).as_posix()
        try:
            parsed = parse_frontmatter(path)
        except yaml.YAMLError as e:
            messages = [f"Invalid YAML frontmatter: {e}"]
        except ValueError as e:
            messages = [str(e)]
        except OSError as e:
            messages = [f"Unreadable file: {e}"]
        else:
            messages = validate_frontmatter(parsed.frontmatter, name, kind)
            messages.extend(validate_references(parsed.frontmatter, files))

        report.issues.extend(
            ValidationIssue(plugin=plugin_name, path=rel_path, message=m) for m in messages
        )

    if report.ok:
        logger.info(f"Plugin {plugin_name}: OK ({len(report.warnings)} warnings)")
    else:
        logger.warning(f"Plugin {plugin_name}: {len(report.errors)} errors")
    return report


def validate_all(
    base_path: Union[str, Path],
    plugins: Optional[list[str]] = None,
) -> list[PluginReport]:
    """Validate the given plugins, or every discovered plugin."""
    if plugins is None:
        plugins = sorted(discover_plugins(base_path))
    return [validate_plugin(base_path, name) for name in plugins]
