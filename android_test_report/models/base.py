"""Base model configuration for decoded report data."""

from pydantic import BaseModel, ConfigDict


class Model(BaseModel):
    """Immutable model rejecting attributes it does not declare."""

    model_config = ConfigDict(frozen=True, extra="forbid")
