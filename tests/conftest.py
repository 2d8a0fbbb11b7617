"""
Pytest configuration and fixtures.
"""

import json
import os
from pathlib import Path
from typing import Any, Callable, Optional

import pytest

# Keep tests independent of the developer's shell and CWD config
for _key in list(os.environ):
    if _key.startswith("AGENTSKILLS_"):
        del os.environ[_key]
os.environ["AGENTSKILLS_LOG_LEVEL"] = "WARNING"


def write_markdown(path: Path, frontmatter: Optional[str], body: str = "") -> Path:
    """Write a markdown file with an optional raw YAML frontmatter block."""
    path.parent.mkdir(parents=True, exist_ok=True)
    if frontmatter is None:
        path.write_text(body, encoding="utf-8")
    else:
        path.write_text(f"---\n{frontmatter}\n---\n{body}", encoding="utf-8")
    return path


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """A repository root with an empty .github/plugins directory."""
    root = tmp_path / "repo"
    (root / ".github" / "plugins").mkdir(parents=True)
    return root


@pytest.fixture
def make_plugin(repo: Path) -> Callable[..., Path]:
    """Factory creating a plugin directory under repo/.github/plugins.

    Commands/agents map a name to raw frontmatter YAML; skills likewise.
    A manifest of None means no plugin.json is written.
    """

    def _make(
        name: str,
        manifest: Optional[dict[str, Any]] = None,
        commands: Optional[dict[str, str]] = None,
        skills: Optional[dict[str, str]] = None,
        agents: Optional[dict[str, str]] = None,
        write_manifest: bool = True,
    ) -> Path:
        plugin_dir = repo / ".github" / "plugins" / name
        plugin_dir.mkdir(parents=True)

        if write_manifest:
            data = manifest if manifest is not None else {
                "name": name,
                "description": f"The {name} plugin",
                "version": "1.0.0",
            }
            (plugin_dir / ".claude-plugin").mkdir()
            (plugin_dir / ".claude-plugin" / "plugin.json").write_text(
                json.dumps(data), encoding="utf-8"
            )

        for cmd, fm in (commands or {}).items():
            write_markdown(plugin_dir / "commands" / f"{cmd}.md", fm, f"# /{cmd}\n")
        for skill, fm in (skills or {}).items():
            write_markdown(plugin_dir / "skills" / skill / "SKILL.md", fm, f"# {skill}\n")
        for agent, fm in (agents or {}).items():
            write_markdown(plugin_dir / "agents" / f"{agent}.md", fm, "You are an agent.\n")

        return plugin_dir

    return _make
