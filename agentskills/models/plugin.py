"""
Plugin models.

Plugins follow the Claude Code plugin format:
  {name}/.claude-plugin/plugin.json  manifest
  {name}/commands/*.md               slash commands
  {name}/skills/{skill}/SKILL.md     skills
  {name}/agents/*.md                 agent definitions
"""

from enum import Enum
from typing import Any, Optional

from pydantic import BaseModel, Field


class PluginManifest(BaseModel):
    """Contents of .claude-plugin/plugin.json.

    Built without validation by the loader, so every field may be missing or
    carry whatever JSON type the file holds. Unknown keys are preserved.
    """

    name: Optional[str] = None
    description: Optional[str] = None
    version: Optional[str] = None
    author: Optional[dict[str, Any]] = None
    homepage: Optional[str] = None
    repository: Optional[str] = None
    license: Optional[str] = None

    model_config = {"extra": "allow", "frozen": True}

    @property
    def author_name(self) -> Optional[str]:
        if isinstance(self.author, dict):
            name = self.author.get("name")
            return name if isinstance(name, str) else None
        return None


class Severity(str, Enum):
    """How serious a validation finding is."""

    ERROR = "error"
    WARNING = "warning"


class ValidationIssue(BaseModel):
    """A single problem found while validating a plugin."""

    severity: Severity = Severity.ERROR
    plugin: str
    path: Optional[str] = None  # Relative to the plugin directory
    message: str

    def __str__(self) -> str:
        location = f"{self.plugin}/{self.path}" if self.path else self.plugin
        return f"[{self.severity.value}] {location}: {self.message}"


class PluginReport(BaseModel):
    """Validation result for one plugin directory."""

    plugin: str
    path: str  # Absolute path on disk
    issues: list[ValidationIssue] = Field(default_factory=list)

    @property
    def errors(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.ERROR]

    @property
    def warnings(self) -> list[ValidationIssue]:
        return [i for i in self.issues if i.severity == Severity.WARNING]

    @property
    def ok(self) -> bool:
        return not self.errors
