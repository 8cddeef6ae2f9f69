"""Run configuration for the report action."""

from pathlib import Path

from pydantic import BaseModel


class ReportConfig(BaseModel):
    """Options recognised by the report action.

    CI inputs arrive as strings, so ``show_skipped`` accepts "true"/"false".
    """

    working_directory: Path = Path(".")
    show_skipped: bool = False
    report_header_postfix: str = ""
