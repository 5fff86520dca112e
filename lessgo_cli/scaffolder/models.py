"""Data model for the scaffolding engine.

Every record handed between the catalog, the renderer, the materializers and
the bootstrapper is a Pydantic v2 model.  Catalog entries and the per-run
``ProjectContext`` are frozen; ``ScaffoldResult`` is built once at the end of
a run and never updated afterwards.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path, PurePosixPath

from pydantic import BaseModel, ConfigDict, Field, field_validator


# ---------------------------------------------------------------------------
# Orchestrator states and stages
# ---------------------------------------------------------------------------


class ScaffoldState(str, Enum):
    """Linear lifecycle of a single scaffold operation."""

    IDLE = "idle"
    DIRECTORIES_READY = "directories_ready"
    FILES_READY = "files_ready"
    BOOTSTRAP_COMPLETE = "bootstrap_complete"
    DONE = "done"
    FAILED = "failed"


class ScaffoldStage(str, Enum):
    """The step that was running when a scaffold failed."""

    BLUEPRINT = "blueprint"
    DIRECTORIES = "directories"
    FILES = "files"
    BOOTSTRAP = "bootstrap"


# ---------------------------------------------------------------------------
# Per-run context
# ---------------------------------------------------------------------------


class ProjectContext(BaseModel):
    """The project being scaffolded: its name and the directory it lives in."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(..., description="Project name, substituted into every template")
    root_path: Path = Field(..., description="Directory the project is materialized into")

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("project name must not be empty")
        return value

    @classmethod
    def for_name(cls, name: str, output_dir: str | Path = ".") -> "ProjectContext":
        """Build a context rooted at ``<output_dir>/<name>``."""
        return cls(name=name, root_path=Path(output_dir) / name)


# ---------------------------------------------------------------------------
# Catalog entries
# ---------------------------------------------------------------------------


class DirectorySpec(BaseModel):
    """A directory, relative to the project root, that must exist before files are written."""

    model_config = ConfigDict(frozen=True)

    relative_path: str

    def resolve(self, root: Path) -> Path:
        return root / PurePosixPath(self.relative_path)


class FileSpec(BaseModel):
    """A file to materialize and the template resource that renders it."""

    model_config = ConfigDict(frozen=True)

    relative_path: str = Field(..., description="Destination, relative to the project root")
    template: str = Field(..., description="Template resource name inside the blueprint directory")

    @property
    def parent(self) -> str:
        """Parent directory in POSIX form; ``""`` for files at the project root."""
        parent = PurePosixPath(self.relative_path).parent
        return "" if str(parent) == "." else str(parent)

    def resolve(self, root: Path) -> Path:
        return root / PurePosixPath(self.relative_path)


class CommandSpec(BaseModel):
    """One external toolchain invocation."""

    model_config = ConfigDict(frozen=True)

    label: str
    program: str
    args: tuple[str, ...] = ()
    working_directory: Path

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]

    def display(self) -> str:
        """Return the command as the user would type it."""
        return " ".join(self.argv)


# ---------------------------------------------------------------------------
# Result
# ---------------------------------------------------------------------------


class ScaffoldResult(BaseModel):
    """Terminal outcome of a scaffold operation."""

    model_config = ConfigDict(frozen=True)

    project_name: str
    project_root: Path
    state: ScaffoldState
    stage: ScaffoldStage | None = None
    error: str | None = None
    files_written: tuple[str, ...] = ()
    commands_run: tuple[str, ...] = ()

    @property
    def success(self) -> bool:
        return self.state is ScaffoldState.DONE

    def failure_message(self) -> str:
        """Describe a failed run, including what was left on disk.

        Returns an empty string for successful runs.
        """
        if self.success:
            return ""

        stage = self.stage.value if self.stage else "unknown"
        lines = [
            f"Scaffold failed during the {stage} stage: {self.error}",
        ]
        if self.files_written:
            lines.append(
                f"{len(self.files_written)} file(s) were already written under "
                f"{self.project_root} and were left in place:"
            )
            lines.extend(f"  - {path}" for path in self.files_written)
        elif self.stage is not ScaffoldStage.BLUEPRINT:
            lines.append(f"No files were written under {self.project_root}.")
        if self.stage is ScaffoldStage.BOOTSTRAP:
            lines.append("All project files were written; the go.mod setup is incomplete.")
        if self.stage is not ScaffoldStage.BLUEPRINT:
            lines.append("Nothing was cleaned up; remove the directory before retrying.")
        return "\n".join(lines)
