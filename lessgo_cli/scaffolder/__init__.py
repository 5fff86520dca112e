"""lessgo-cli scaffolder -- materializes a LessGo starter project.

This package turns a blueprint from the catalog plus a project name into a
directory tree of rendered files, then bootstraps the project's ``go.mod``.

Quick usage::

    from lessgo_cli.scaffolder import ProjectContext, ProjectGenerator

    context = ProjectContext.for_name("demo", output_dir="/tmp/output")
    result = await ProjectGenerator().generate(context)
    if not result.success:
        print(result.failure_message())
"""

from lessgo_cli.scaffolder.blueprints import Blueprint, get_blueprint, list_blueprints
from lessgo_cli.scaffolder.bootstrap import ToolchainBootstrapper
from lessgo_cli.scaffolder.errors import ScaffoldError
from lessgo_cli.scaffolder.generator import ProjectGenerator
from lessgo_cli.scaffolder.models import ProjectContext, ScaffoldResult, ScaffoldState
from lessgo_cli.scaffolder.templates import TemplateRenderer

__all__ = [
    "Blueprint",
    "ProjectContext",
    "ProjectGenerator",
    "ScaffoldError",
    "ScaffoldResult",
    "ScaffoldState",
    "TemplateRenderer",
    "ToolchainBootstrapper",
    "get_blueprint",
    "list_blueprints",
]
