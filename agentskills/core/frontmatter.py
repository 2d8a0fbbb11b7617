"""
YAML frontmatter parsing for command, skill and agent markdown files.

Expected format:

    ---
    name: my-skill
    description: What it does
    ---

    # Markdown body...

Files without a leading, closed `---` block are plain markdown: the whole
content becomes the body and the frontmatter is empty.
"""

import logging
import re
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional, Union

import yaml

logger = logging.getLogger(__name__)

Frontmatter = dict[str, Any]

# Opening `---` must be the very first line. The YAML block is optional so that
# `---\n---\n` parses as an empty mapping. The closing `---` must sit alone on
# its line; one line break after it belongs to the delimiter, not the body.
FRONTMATTER_PATTERN = re.compile(
    r"\A---\r?\n(?:(.*?)\r?\n)?---(?:\r?\n|\Z)(.*)\Z",
    re.DOTALL,
)


@dataclass
class ParsedMarkdown:
    """Frontmatter mapping plus the markdown that follows it."""
    frontmatter: Frontmatter = field(default_factory=dict)
    body: str = ""


def split_frontmatter(content: str) -> tuple[Optional[str], str]:
    """Split content into (yaml_block, body).

    yaml_block is None when the content has no frontmatter, and "" when the
    block is present but empty.
    """
    match = FRONTMATTER_PATTERN.match(content)
    if not match:
        return None, content
    return match.group(1) or "", match.group(2)


def parse_frontmatter_text(content: str) -> ParsedMarkdown:
    """Parse frontmatter from markdown text.

    Raises:
        yaml.YAMLError: the frontmatter block is not valid YAML
        ValueError: the frontmatter is valid YAML but not a mapping
    """
    block, body = split_frontmatter(content)
    if block is None:
        return ParsedMarkdown(frontmatter={}, body=content)

    data = yaml.safe_load(block)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ValueError(
            f"Frontmatter must be a YAML mapping, got {type(data).__name__}"
        )
    return ParsedMarkdown(frontmatter=data, body=body)


def parse_frontmatter(file_path: Union[str, Path]) -> ParsedMarkdown:
    """Read a markdown file and parse its frontmatter.

    Line endings are kept as they are on disk, so a CRLF file yields a CRLF body.
    """
    with open(file_path, encoding="utf-8", newline="") as f:
        content = f.read()
    parsed = parse_frontmatter_text(content)
    if not parsed.frontmatter:
        logger.debug(f"No frontmatter in {file_path}")
    return parsed
