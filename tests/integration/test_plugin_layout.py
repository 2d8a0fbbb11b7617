"""
End-to-end checks over a realistic plugin tree.

Walks the layout the way a repository test suite does: enumerate plugins,
load each manifest, parse every command/skill/agent file and check that
command references point at skills that exist.
"""

import json

import pytest

from agentskills import (
    collect_plugin_files,
    discover_plugins,
    load_manifest,
    parse_frontmatter,
    plugin_path,
    validate_plugin,
)


@pytest.fixture
def foo_plugin(repo):
    """plugins/foo with a manifest, one command, one skill and an empty agents dir."""
    plugin_dir = repo / ".github" / "plugins" / "foo"
    (plugin_dir / ".claude-plugin").mkdir(parents=True)
    (plugin_dir / ".claude-plugin" / "plugin.json").write_text(json.dumps({
        "name": "foo",
        "description": "Foo plugin",
        "version": "0.1.0",
        "author": {"name": "Foo Team"},
        "license": "MIT",
    }))
    (plugin_dir / "commands").mkdir()
    (plugin_dir / "commands" / "run.md").write_text(
        "---\nname: run\ndescription: Run the bar skill\nskill: bar\n---\n# /run\n"
    )
    (plugin_dir / "skills" / "bar").mkdir(parents=True)
    (plugin_dir / "skills" / "bar" / "SKILL.md").write_text(
        "---\nname: bar\ndescription: Bar skill\n---\n# Bar\n"
    )
    (plugin_dir / "agents").mkdir()
    return plugin_dir


def test_end_to_end_layout(repo, foo_plugin):
    assert discover_plugins(repo) == ["foo"]
    assert plugin_path(repo, "foo") == foo_plugin

    files = collect_plugin_files(foo_plugin)
    assert files.commands == ["run"]
    assert files.skills == ["bar"]
    assert files.agents == []

    manifest = load_manifest(foo_plugin)
    assert manifest.name == "foo"
    assert manifest.author_name == "Foo Team"


def test_every_entity_has_name_and_description(repo, foo_plugin):
    for name in discover_plugins(repo):
        plugin_dir = plugin_path(repo, name)
        files = collect_plugin_files(plugin_dir)

        for command in files.commands:
            fm = parse_frontmatter(plugin_dir / "commands" / f"{command}.md").frontmatter
            assert fm["name"] == command
            assert fm["description"]

        for skill in files.skills:
            fm = parse_frontmatter(plugin_dir / "skills" / skill / "SKILL.md").frontmatter
            assert fm["name"] == skill
            assert fm["description"]


def test_command_references_existing_skill(foo_plugin):
    files = collect_plugin_files(foo_plugin)
    fm = parse_frontmatter(foo_plugin / "commands" / "run.md").frontmatter

    assert fm["skill"] in files.skills


def test_validation_passes(repo, foo_plugin):
    report = validate_plugin(repo, "foo")

    assert report.ok
    assert report.issues == []


def test_discovery_does_not_modify_tree(repo, foo_plugin):
    before = sorted(p.relative_to(repo) for p in repo.rglob("*"))

    discover_plugins(repo)
    collect_plugin_files(foo_plugin)
    load_manifest(foo_plugin)
    validate_plugin(repo, "foo")

    after = sorted(p.relative_to(repo) for p in repo.rglob("*"))
    assert before == after
