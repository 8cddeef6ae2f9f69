"""Configuration for the GitHub Actions job summary sink."""

from pathlib import Path

from pydantic import BaseModel


class GitHubSummaryConfig(BaseModel):
    """Configuration for the GitHub Actions job summary sink."""

    # Falls back to $GITHUB_STEP_SUMMARY when unset
    path: Path | None = None
    overwrite: bool = False
