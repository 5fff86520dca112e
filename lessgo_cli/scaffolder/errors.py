"""Exceptions raised by the scaffolding engine.

Every error is fatal to the scaffold that raised it.  The orchestrator
catches ``ScaffoldError``, records the stage and message in the
``ScaffoldResult``, and stops.
"""

from __future__ import annotations

from pathlib import Path

from .models import ScaffoldStage


class ScaffoldError(Exception):
    """Base class for failures that abort a scaffold operation."""

    def __init__(self, stage: ScaffoldStage, message: str) -> None:
        self.stage = stage
        self.message = message
        super().__init__(message)


class UnknownBlueprintError(ScaffoldError):
    """Raised when a blueprint identity is not in the catalog."""

    def __init__(self, name: str, available: list[str]) -> None:
        self.name = name
        super().__init__(
            ScaffoldStage.BLUEPRINT,
            f"Unknown blueprint {name!r} (available: {', '.join(available)})",
        )


# ---------------------------------------------------------------------------
# Directories
# ---------------------------------------------------------------------------


class DirectoryCreationFailed(ScaffoldError):
    def __init__(self, directory: Path, cause: BaseException) -> None:
        self.directory = directory
        self.cause = cause
        super().__init__(
            ScaffoldStage.DIRECTORIES,
            f"Error creating directory {directory}: {cause}",
        )


class DirectoryVerificationFailed(ScaffoldError):
    """The directory was created without error but is not present afterwards."""

    def __init__(self, directory: Path) -> None:
        self.directory = directory
        super().__init__(
            ScaffoldStage.DIRECTORIES,
            f"Failed to create the {directory} directory (missing after creation)",
        )


# ---------------------------------------------------------------------------
# Files
# ---------------------------------------------------------------------------


class FileRenderFailed(ScaffoldError):
    def __init__(self, path: str, cause: BaseException | str) -> None:
        self.path = path
        self.cause = cause
        super().__init__(ScaffoldStage.FILES, f"Error rendering {path}: {cause}")


class FileWriteFailed(ScaffoldError):
    def __init__(self, path: Path, cause: BaseException) -> None:
        self.path = path
        self.cause = cause
        super().__init__(ScaffoldStage.FILES, f"Error creating {path}: {cause}")


# ---------------------------------------------------------------------------
# Toolchain
# ---------------------------------------------------------------------------


class CommandFailed(ScaffoldError):
    """An external toolchain command exited non-zero or could not be started."""

    action = "running"

    def __init__(self, command: str, returncode: int | None, detail: str = "") -> None:
        self.command = command
        self.returncode = returncode
        self.detail = detail
        if returncode is None:
            reason = detail or "could not be started"
        else:
            reason = f"exit status {returncode}"
            if detail:
                reason = f"{reason}: {detail}"
        super().__init__(
            ScaffoldStage.BOOTSTRAP,
            f"Error {self.action} `{command}` ({reason})",
        )


class CommandInitFailed(CommandFailed):
    action = "initializing go.mod with"


class CommandResolveFailed(CommandFailed):
    action = "resolving dependencies with"
