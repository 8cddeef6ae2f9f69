"""Configuration for the Markdown sink."""

from pathlib import Path

from pydantic import BaseModel


class MarkdownConfig(BaseModel):
    """Configuration for the Markdown sink."""

    # Written to stdout when unset
    path: Path | None = None
