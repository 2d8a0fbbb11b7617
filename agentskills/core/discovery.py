"""
Plugin discovery.

Walks the repository plugin layout:

    {repo}/.github/plugins/{plugin}/commands/*.md
    {repo}/.github/plugins/{plugin}/skills/{skill}/SKILL.md
    {repo}/.github/plugins/{plugin}/agents/*.md

A missing directory at any level is reported as "nothing found", never as an
error. Anything else the filesystem raises (a path component that is a file,
a permission failure) propagates unchanged.
"""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Union

logger = logging.getLogger(__name__)

PLUGINS_DIR = ".github/plugins"
SKILL_FILE = "SKILL.md"
MARKDOWN_EXT = ".md"

PathLike = Union[str, Path]


@dataclass
class PluginFiles:
    """Entity names found inside a plugin directory."""
    commands: list[str] = field(default_factory=list)
    skills: list[str] = field(default_factory=list)
    agents: list[str] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not (self.commands or self.skills or self.agents)


def discover_plugins(base_path: PathLike) -> list[str]:
    """List plugin directory names under {base_path}/.github/plugins.

    Order follows the filesystem listing and is not sorted.
    """
    plugins_dir = Path(base_path) / PLUGINS_DIR
    if not plugins_dir.exists():
        logger.debug(f"Plugins directory does not exist: {plugins_dir}")
        return []

    names = [
        entry.name
        for entry in plugins_dir.iterdir()
        if entry.is_dir() and not entry.is_symlink()
    ]
    logger.debug(f"Discovered {len(names)} plugins in {plugins_dir}")
    return names


def plugin_path(base_path: PathLike, plugin_name: str) -> Path:
    """Path to a plugin directory. Does not touch the filesystem."""
    return Path(base_path) / PLUGINS_DIR / plugin_name


def discover_files(directory: PathLike, extension: str) -> list[str]:
    """List regular files directly inside a directory ending with `extension`.

    Returns raw filenames with the extension kept. Symlinks and
    subdirectories are skipped.
    """
    directory = Path(directory)
    if not directory.exists():
        return []

    return [
        entry.name
        for entry in directory.iterdir()
        if entry.is_file()
        and not entry.is_symlink()
        and entry.name.endswith(extension)
    ]


def discover_skill_dirs(skills_dir: PathLike) -> list[str]:
    """List skill directory names: subdirectories holding a SKILL.md."""
    skills_dir = Path(skills_dir)
    if not skills_dir.exists():
        return []

    skills: list[str] = []
    for entry in skills_dir.iterdir():
        if not entry.is_dir() or entry.is_symlink():
            continue
        if (entry / SKILL_FILE).is_file():
            skills.append(entry.name)
        else:
            logger.debug(f"Skipping skills/{entry.name}: no {SKILL_FILE}")
    return skills


def _strip_md(filename: str) -> str:
    if filename.endswith(MARKDOWN_EXT):
        return filename[: -len(MARKDOWN_EXT)]
    return filename


def collect_plugin_files(plugin_dir: PathLike) -> PluginFiles:
    """Collect command, skill and agent names for a plugin.

    The three lists are independent; cross-references between them are
    checked by the validation layer, not here.
    """
    plugin_dir = Path(plugin_dir)

    files = PluginFiles(
        commands=[
            _strip_md(f) for f in discover_files(plugin_dir / "commands", MARKDOWN_EXT)
        ],
        skills=discover_skill_dirs(plugin_dir / "skills"),
        agents=[
            _strip_md(f) for f in discover_files(plugin_dir / "agents", MARKDOWN_EXT)
        ],
    )

    logger.debug(
        f"Plugin {plugin_dir.name}: {len(files.commands)} commands, "
        f"{len(files.skills)} skills, {len(files.agents)} agents"
    )
    return files
