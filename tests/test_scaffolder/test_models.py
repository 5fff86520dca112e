"""Tests for the scaffolder data model and error taxonomy."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from lessgo_cli.scaffolder.errors import (
    CommandInitFailed,
    CommandResolveFailed,
    DirectoryCreationFailed,
    DirectoryVerificationFailed,
    FileWriteFailed,
)
from lessgo_cli.scaffolder.models import (
    CommandSpec,
    FileSpec,
    ProjectContext,
    ScaffoldResult,
    ScaffoldStage,
    ScaffoldState,
)


pytestmark = pytest.mark.unit


# ---------------------------------------------------------------------------
# ProjectContext
# ---------------------------------------------------------------------------


class TestProjectContext:
    def test_for_name(self, tmp_path):
        ctx = ProjectContext.for_name("demo", tmp_path)
        assert ctx.name == "demo"
        assert ctx.root_path == tmp_path / "demo"

    def test_default_output_dir_is_cwd(self):
        assert ProjectContext.for_name("demo").root_path == Path("demo")

    @pytest.mark.parametrize("name", ["", "   ", "\t\n"])
    def test_blank_name_rejected(self, name):
        with pytest.raises(ValidationError):
            ProjectContext(name=name, root_path=Path("x"))

    def test_frozen(self, tmp_path):
        ctx = ProjectContext.for_name("demo", tmp_path)
        with pytest.raises(ValidationError):
            ctx.name = "other"


# ---------------------------------------------------------------------------
# FileSpec / CommandSpec
# ---------------------------------------------------------------------------


class TestFileSpec:
    def test_parent_nested(self):
        assert FileSpec(relative_path="app/src/a.go", template="a").parent == "app/src"

    def test_parent_root(self):
        assert FileSpec(relative_path=".env", template="env").parent == ""

    def test_resolve(self, tmp_path):
        spec = FileSpec(relative_path="app/cmd/main.go", template="main")
        assert spec.resolve(tmp_path) == tmp_path / "app" / "cmd" / "main.go"


class TestCommandSpec:
    def test_argv_and_display(self, tmp_path):
        spec = CommandSpec(
            label="init", program="go", args=("mod", "init", "demo"), working_directory=tmp_path
        )
        assert spec.argv == ["go", "mod", "init", "demo"]
        assert spec.display() == "go mod init demo"


# ---------------------------------------------------------------------------
# ScaffoldResult
# ---------------------------------------------------------------------------


class TestScaffoldResult:
    def test_success(self, tmp_path):
        result = ScaffoldResult(
            project_name="demo", project_root=tmp_path, state=ScaffoldState.DONE
        )
        assert result.success is True
        assert result.failure_message() == ""

    def test_failure_lists_written_files(self, tmp_path):
        result = ScaffoldResult(
            project_name="demo",
            project_root=tmp_path,
            state=ScaffoldState.FAILED,
            stage=ScaffoldStage.FILES,
            error="Error creating Makefile: denied",
            files_written=("app/cmd/main.go", ".env"),
        )
        message = result.failure_message()
        assert result.success is False
        assert "files stage" in message
        assert "Error creating Makefile: denied" in message
        assert "2 file(s)" in message
        assert "app/cmd/main.go" in message
        assert "Nothing was cleaned up" in message

    def test_directory_failure_reports_no_files(self, tmp_path):
        result = ScaffoldResult(
            project_name="demo",
            project_root=tmp_path,
            state=ScaffoldState.FAILED,
            stage=ScaffoldStage.DIRECTORIES,
            error="boom",
        )
        assert "No files were written" in result.failure_message()

    def test_bootstrap_failure_mentions_go_mod(self, tmp_path):
        result = ScaffoldResult(
            project_name="demo",
            project_root=tmp_path,
            state=ScaffoldState.FAILED,
            stage=ScaffoldStage.BOOTSTRAP,
            error="Error initializing go.mod",
            files_written=("app/cmd/main.go",),
        )
        assert "go.mod setup is incomplete" in result.failure_message()


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------


class TestErrors:
    def test_directory_creation(self, tmp_path):
        err = DirectoryCreationFailed(tmp_path / "app", PermissionError("denied"))
        assert err.stage is ScaffoldStage.DIRECTORIES
        assert "app" in str(err)
        assert "denied" in str(err)

    def test_directory_verification(self, tmp_path):
        err = DirectoryVerificationFailed(tmp_path / "app" / "cmd")
        assert err.stage is ScaffoldStage.DIRECTORIES
        assert "cmd" in str(err)

    def test_file_write(self, tmp_path):
        err = FileWriteFailed(tmp_path / "Makefile", OSError("disk full"))
        assert err.stage is ScaffoldStage.FILES
        assert "Makefile" in str(err)
        assert "disk full" in str(err)

    def test_command_init_with_exit_status(self):
        err = CommandInitFailed("go mod init demo", 1, "go: cannot determine module path")
        assert err.stage is ScaffoldStage.BOOTSTRAP
        assert "initializing go.mod" in str(err)
        assert "exit status 1" in str(err)
        assert "cannot determine module path" in str(err)

    def test_command_resolve_not_started(self):
        err = CommandResolveFailed("go mod tidy", None, "No such file or directory: 'go'")
        assert err.returncode is None
        assert "resolving dependencies" in str(err)
        assert "No such file" in str(err)
