"""Run configuration for the dirsim interpreter.

A run needs a script, an output location and a job id; the output file name
falls back to one derived from the job id when none is given.
"""

from __future__ import annotations

import os
import time
from pathlib import Path

from pydantic import BaseModel, Field

LOG_LEVEL_ENV = "DIRSIM_LOG_LEVEL"


def _job_id() -> int:
    return int(time.time() * 1000)


class RunConfig(BaseModel):
    """Settings for a single script run."""

    script_path: Path = Field(description="Script to execute, one command per line")
    output_path: Path | None = Field(
        default=None,
        description="Output file; output_<job_id>.txt when omitted",
    )
    job_id: int = Field(
        default_factory=_job_id,
        description="Run identifier, the start time in epoch milliseconds",
    )
    echo: bool = Field(
        default=True,
        description="Mirror every output block to stdout",
    )
    log_level: str = Field(default="WARNING", description="Root logging level")

    @property
    def resolved_output_path(self) -> Path:
        """Output file to write, generating a name from the job id if needed."""
        if self.output_path is not None:
            return self.output_path
        return Path(f"output_{self.job_id}.txt")

    @classmethod
    def from_env(
        cls, script_path: Path | str, output_path: Path | str | None = None
    ) -> RunConfig:
        """Build a config, taking the log level from DIRSIM_LOG_LEVEL if set."""
        return cls(
            script_path=Path(script_path),
            output_path=Path(output_path) if output_path else None,
            log_level=os.environ.get(LOG_LEVEL_ENV, "WARNING").upper(),
        )
