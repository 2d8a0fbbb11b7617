"""
Pydantic models for agentskills.
"""

from agentskills.models.plugin import (
    PluginManifest,
    PluginReport,
    Severity,
    ValidationIssue,
)

__all__ = [
    "PluginManifest",
    "PluginReport",
    "Severity",
    "ValidationIssue",
]
