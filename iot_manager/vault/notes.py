"""Markdown notes wrapping a fenced YAML block."""

import re
from typing import Optional

YAML_BLOCK_RE = re.compile(r"```yaml\n(.*?)\n```", re.DOTALL)

NOTE_EXTENSION = ".md"


def extract_yaml_block(content: str) -> Optional[str]:
    """Return the text of the first ```yaml block in a note, or None."""
    match = YAML_BLOCK_RE.search(content)
    if match is None:
        return None
    return match.group(1)


def render_note(title: str, yaml_text: str) -> str:
    """Wrap YAML text in a titled note."""
    return f"# {title}\n```yaml\n{yaml_text}\n```"
