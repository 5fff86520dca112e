"""lessgo-cli configuration.

Typed configuration for the scaffolder and its CLI.  Settings use a
Pydantic v2 model so they can be validated at construction time and
read from environment variables without boiler-plate.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

from lessgo_cli.scaffolder.blueprints import DEFAULT_BLUEPRINT

_TRUTHY = {"1", "true", "yes", "on"}


def _env_flag(name: str) -> bool | None:
    raw = os.environ.get(name)
    if raw is None or not raw.strip():
        return None
    return raw.strip().lower() in _TRUTHY


class Config(BaseModel):
    """Global lessgo-cli configuration.

    Instances are created once by the CLI entry point (from the environment,
    then overridden by command-line flags) and passed to the generator.
    """

    output_dir: Path = Field(
        default=Path("."), description="Directory the project folder is created in"
    )
    blueprint: str = Field(default=DEFAULT_BLUEPRINT, description="Blueprint identity to render")
    go_binary: str = Field(default="go", min_length=1, description="Go toolchain executable")
    skip_bootstrap: bool = Field(
        default=False, description="Write files only; do not run go mod init/tidy"
    )
    verbose: bool = Field(default=False, description="Log every engine step")

    def project_root(self, name: str) -> Path:
        """Directory a project called *name* is materialized into."""
        return self.output_dir / name

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            LESSGO_OUTPUT_DIR, LESSGO_BLUEPRINT, LESSGO_GO_BINARY,
            LESSGO_SKIP_BOOTSTRAP, LESSGO_VERBOSE.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get("LESSGO_OUTPUT_DIR"):
            kwargs["output_dir"] = Path(os.environ["LESSGO_OUTPUT_DIR"])
        if os.environ.get("LESSGO_BLUEPRINT"):
            kwargs["blueprint"] = os.environ["LESSGO_BLUEPRINT"]
        if os.environ.get("LESSGO_GO_BINARY"):
            kwargs["go_binary"] = os.environ["LESSGO_GO_BINARY"]

        skip = _env_flag("LESSGO_SKIP_BOOTSTRAP")
        if skip is not None:
            kwargs["skip_bootstrap"] = skip
        verbose = _env_flag("LESSGO_VERBOSE")
        if verbose is not None:
            kwargs["verbose"] = verbose

        return cls(**kwargs)
