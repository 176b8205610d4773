"""Review run configuration and result models."""

import tempfile
from datetime import datetime
from pathlib import Path

from pydantic import BaseModel, Field

from ric.config import DEFAULT_EDITOR_COMMAND
from ric.models.pr import ResolvedSource
from ric.models.target import RunOptions, TargetReference


class ReviewConfig(BaseModel):
    """Everything needed for a single review run."""

    target: TargetReference = Field(..., description="Parsed target")
    options: RunOptions = Field(..., description="Clone options")
    editor_command: str = Field(
        default=DEFAULT_EDITOR_COMMAND, description="Editor command"
    )
    default_branch: str = Field(default="master", description="Repository branch")
    temp_root: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()),
        description="Directory the workspace is created in",
    )


class ReviewResult(BaseModel):
    """Outcome of a finished review."""

    target: TargetReference = Field(..., description="Reviewed target")
    source: ResolvedSource = Field(..., description="Cloned source")
    workspace_dir: Path = Field(..., description="Workspace directory")
    started_at: datetime | None = Field(default=None, description="Run start time")
    finished_at: datetime | None = Field(default=None, description="Run finish time")

    @property
    def duration_sec(self) -> float | None:
        """Calculate run duration."""
        if self.started_at and self.finished_at:
            return (self.finished_at - self.started_at).total_seconds()
        return None
