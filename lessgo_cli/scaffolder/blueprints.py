"""Blueprint catalog: the directory skeleton and file templates of each project layout.

The catalog is static data.  Each blueprint maps an identity to an ordered
tuple of directories and an ordered tuple of files; the order of ``files`` is
the order in which they are written.  Template text lives next to this module
under ``templates/<blueprint>/``.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

from .errors import UnknownBlueprintError
from .models import DirectorySpec, FileSpec


DEFAULT_BLUEPRINT = "default"


class Blueprint(BaseModel):
    """A named project skeleton."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    directories: tuple[DirectorySpec, ...]
    files: tuple[FileSpec, ...]

    @property
    def template_prefix(self) -> str:
        """Subdirectory of the template root holding this blueprint's templates."""
        return self.name

    def template_path(self, spec: FileSpec) -> str:
        return f"{self.template_prefix}/{spec.template}"

    def validate_layout(self) -> list[str]:
        """Return the parent directories of files that no DirectorySpec covers.

        A parent is covered when it is listed itself or is an ancestor of a
        listed directory (``mkdir(parents=True)`` creates it along the way).
        Files at the project root need no entry.
        """
        creatable: set[str] = set()
        for directory in self.directories:
            parts = directory.relative_path.split("/")
            for i in range(1, len(parts) + 1):
                creatable.add("/".join(parts[:i]))

        missing: list[str] = []
        for spec in self.files:
            parent = spec.parent
            if parent and parent not in creatable and parent not in missing:
                missing.append(parent)
        return missing


# ---------------------------------------------------------------------------
# Default web starter
# ---------------------------------------------------------------------------

_DEFAULT = Blueprint(
    name=DEFAULT_BLUEPRINT,
    description="LessGo web starter: app entry point, root module/controller/service, Docker and dev tooling",
    directories=(
        DirectorySpec(relative_path="app/cmd"),
        DirectorySpec(relative_path="app/src"),
    ),
    files=(
        FileSpec(relative_path="app/cmd/main.go", template="main.go.tmpl"),
        FileSpec(relative_path=".env", template="env.tmpl"),
        FileSpec(relative_path="Makefile", template="Makefile.tmpl"),
        FileSpec(relative_path=".air.toml", template="air.toml.tmpl"),
        FileSpec(relative_path="docker-compose.yml", template="docker-compose.yml.tmpl"),
        FileSpec(relative_path="Dockerfile", template="Dockerfile.tmpl"),
        FileSpec(relative_path="app/src/app_controller.go", template="app_controller.go.tmpl"),
        FileSpec(relative_path="app/src/app_module.go", template="app_module.go.tmpl"),
        FileSpec(relative_path="app/src/app_service.go", template="app_service.go.tmpl"),
    ),
)

BLUEPRINTS: dict[str, Blueprint] = {
    _DEFAULT.name: _DEFAULT,
}


def list_blueprints() -> list[str]:
    return sorted(BLUEPRINTS)


def get_blueprint(name: str = DEFAULT_BLUEPRINT) -> Blueprint:
    """Look up a blueprint by identity.

    Raises:
        UnknownBlueprintError: If *name* is not in the catalog.
    """
    try:
        return BLUEPRINTS[name]
    except KeyError:
        raise UnknownBlueprintError(name, list_blueprints()) from None
