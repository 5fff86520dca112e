"""Main scaffolding orchestrator.

Takes a ``ProjectContext`` and a blueprint from the catalog and materializes
the project: directories first, then every rendered file in catalog order,
then the Go module bootstrap.  Each step is awaited to completion before the
next one starts, and the first failure ends the run.  Nothing written before
a failure is removed.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from .blueprints import Blueprint, get_blueprint
from .bootstrap import ToolchainBootstrapper
from .errors import (
    DirectoryCreationFailed,
    DirectoryVerificationFailed,
    FileWriteFailed,
    ScaffoldError,
)
from .models import ProjectContext, ScaffoldResult, ScaffoldStage, ScaffoldState
from .templates import TemplateRenderer

if TYPE_CHECKING:
    from lessgo_cli.config import Config

logger = logging.getLogger(__name__)


class ProjectGenerator:
    """Runs one scaffold operation.

    State advances ``IDLE -> DIRECTORIES_READY -> FILES_READY ->
    BOOTSTRAP_COMPLETE -> DONE``; any failure moves to ``FAILED``.  Both
    ``DONE`` and ``FAILED`` are terminal, so an instance generates at most
    one project.
    """

    def __init__(
        self,
        blueprint: Blueprint | None = None,
        *,
        renderer: TemplateRenderer | None = None,
        bootstrapper: ToolchainBootstrapper | None = None,
        skip_bootstrap: bool = False,
    ) -> None:
        self.blueprint = blueprint or get_blueprint()
        self.renderer = renderer or TemplateRenderer()
        self.bootstrapper = bootstrapper or ToolchainBootstrapper()
        self.skip_bootstrap = skip_bootstrap
        self.state = ScaffoldState.IDLE
        self.files_written: list[str] = []
        self.commands_run: list[str] = []

    @classmethod
    def from_config(cls, config: Config) -> "ProjectGenerator":
        """Build a generator from a ``lessgo_cli.config.Config``."""
        return cls(
            get_blueprint(config.blueprint),
            bootstrapper=ToolchainBootstrapper(config.go_binary),
            skip_bootstrap=config.skip_bootstrap,
        )

    # -- Public API --------------------------------------------------------

    async def generate(self, context: ProjectContext) -> ScaffoldResult:
        """Materialize the blueprint for *context*.

        Returns:
            The terminal ``ScaffoldResult``.  Failures are reported in the
            result, not raised.
        """
        if self.state is not ScaffoldState.IDLE:
            raise RuntimeError(f"generator already used (state: {self.state.value})")

        if await asyncio.to_thread(context.root_path.exists):
            logger.warning(
                "%s already exists; existing files will be overwritten", context.root_path
            )

        try:
            # 1. Directory skeleton
            await self.create_directories(context)
            self.state = ScaffoldState.DIRECTORIES_READY

            # 2. Rendered files
            await self.write_files(context)
            self.state = ScaffoldState.FILES_READY

            # 3. go mod init / go mod tidy
            if self.skip_bootstrap:
                logger.debug("Skipping toolchain bootstrap")
            else:
                completed = await self.bootstrapper.run(context)
                self.commands_run.extend(spec.display() for spec in completed)
                self.state = ScaffoldState.BOOTSTRAP_COMPLETE
        except ScaffoldError as exc:
            self.state = ScaffoldState.FAILED
            logger.debug("Scaffold failed in %s stage: %s", exc.stage.value, exc)
            return self._result(context, stage=exc.stage, error=str(exc))

        self.state = ScaffoldState.DONE
        return self._result(context)

    # -- Directory structure -----------------------------------------------

    async def create_directories(self, context: ProjectContext) -> list[Path]:
        """Create every blueprint directory, then confirm each one exists.

        Pre-existing directories are not an error.

        Raises:
            DirectoryCreationFailed: ``mkdir`` raised.
            DirectoryVerificationFailed: A directory is missing after creation.
        """
        paths = [d.resolve(context.root_path) for d in self.blueprint.directories]

        for path in paths:
            logger.debug("Creating directory %s", path)
            try:
                await asyncio.to_thread(path.mkdir, parents=True, exist_ok=True)
            except OSError as exc:
                raise DirectoryCreationFailed(path, exc) from exc

        for path in paths:
            if not await asyncio.to_thread(path.is_dir):
                raise DirectoryVerificationFailed(path)

        return paths

    # -- File rendering ----------------------------------------------------

    async def write_files(self, context: ProjectContext) -> list[Path]:
        """Render and write every blueprint file in catalog order.

        Stops at the first failure without touching the files already
        written.

        Raises:
            FileRenderFailed: A template could not be loaded or rendered.
            FileWriteFailed: A write raised.
        """
        written: list[Path] = []
        for spec in self.blueprint.files:
            content = self.renderer.render(self.blueprint.template_path(spec), context)
            out = spec.resolve(context.root_path)
            logger.debug("Writing %s", out)
            try:
                await asyncio.to_thread(_write_file, out, content)
            except (OSError, UnicodeError) as exc:
                raise FileWriteFailed(out, exc) from exc
            written.append(out)
            self.files_written.append(spec.relative_path)
        return written

    # -- Result ------------------------------------------------------------

    def _result(
        self,
        context: ProjectContext,
        *,
        stage: ScaffoldStage | None = None,
        error: str | None = None,
    ) -> ScaffoldResult:
        return ScaffoldResult(
            project_name=context.name,
            project_root=context.root_path,
            state=self.state,
            stage=stage,
            error=error,
            files_written=tuple(self.files_written),
            commands_run=tuple(self.commands_run),
        )


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------


def _write_file(path: Path, content: str) -> None:
    """Write *content* exactly as rendered, replacing any existing file."""
    with path.open("w", encoding="utf-8", newline="") as fh:
        fh.write(content)
