"""projstarter configuration.

Typed settings for the CLI.  Values come from defaults, then environment
variables (:meth:`Config.from_env`), then command-line flags.
"""

from __future__ import annotations

import os
from pathlib import Path

from pydantic import BaseModel, Field


_TRUTHY = {"1", "true", "yes", "on"}


class Config(BaseModel):
    """Settings shared by every ``proj`` subcommand."""

    output_dir: Path = Field(
        default=Path("."),
        description="Directory the new project root is created in",
    )
    quiet: bool = Field(default=False, description="Suppress informational output")

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            PROJ_OUTPUT_DIR, PROJ_QUIET.
        """
        kwargs: dict[str, object] = {}
        if os.environ.get("PROJ_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["PROJ_OUTPUT_DIR"])
        if os.environ.get("PROJ_QUIET"):
            kwargs["quiet"] = os.environ["PROJ_QUIET"].strip().lower() in _TRUTHY
        return cls(**kwargs)
