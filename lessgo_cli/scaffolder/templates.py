"""Placeholder substitution for project scaffolding.

Provides the TemplateRenderer class which loads blueprint templates from the
``lessgo_cli/scaffolder/templates/<blueprint>/`` directory and renders them
for a ``ProjectContext``.  Rendering is a literal find-and-replace of the
``{{project_name}}`` marker; there are no expressions, filters or loops.
"""

from __future__ import annotations

from pathlib import Path

from .errors import FileRenderFailed
from .models import ProjectContext


PLACEHOLDER = "{{project_name}}"


# ---------------------------------------------------------------------------
# Template directory discovery
# ---------------------------------------------------------------------------

_DEFAULT_TEMPLATE_DIR = Path(__file__).parent / "templates"


# ---------------------------------------------------------------------------
# TemplateRenderer
# ---------------------------------------------------------------------------


class TemplateRenderer:
    """Renders blueprint templates by substituting the project name.

    Templates are plain text files (``*.tmpl``) stored under a configurable
    template directory.  Every occurrence of ``{{project_name}}`` is replaced
    with ``ProjectContext.name``; all other text, including other ``{{...}}``
    sequences, is emitted verbatim.
    """

    def __init__(self, template_dir: str | Path | None = None) -> None:
        if template_dir is None:
            template_dir = _DEFAULT_TEMPLATE_DIR
        self.template_dir = Path(template_dir)

    # -- Single template rendering -----------------------------------------

    def load(self, template_path: str) -> str:
        """Return the raw text of a template, relative to the template directory.

        Raises:
            FileRenderFailed: If the template cannot be read.
        """
        path = self.template_dir / template_path
        try:
            # newline="" keeps the template bytes exactly as stored
            with path.open(encoding="utf-8", newline="") as fh:
                return fh.read()
        except (OSError, UnicodeDecodeError) as exc:
            raise FileRenderFailed(template_path, exc) from exc

    def render(self, template_path: str, context: ProjectContext) -> str:
        """Load and render a single template for *context*."""
        return self.render_string(self.load(template_path), context, source=template_path)

    def render_string(
        self,
        template_string: str,
        context: ProjectContext,
        *,
        source: str = "<string>",
    ) -> str:
        """Render an inline template string.

        Raises:
            FileRenderFailed: If a placeholder survives substitution.
        """
        rendered = template_string.replace(PLACEHOLDER, context.name)
        if PLACEHOLDER in rendered:
            # Only possible when the name itself contains the marker.
            raise FileRenderFailed(source, f"unrendered placeholder {PLACEHOLDER}")
        return rendered

    # -- Utility -----------------------------------------------------------

    def list_templates(self, prefix: str = "") -> list[str]:
        """Return a sorted list of all ``.tmpl`` paths under *prefix*.

        Paths are relative to the template root directory.
        """
        search_dir = self.template_dir / prefix if prefix else self.template_dir
        if not search_dir.is_dir():
            return []
        return sorted(
            p.relative_to(self.template_dir).as_posix()
            for p in search_dir.rglob("*.tmpl")
        )


def count_placeholders(template_string: str) -> int:
    """Number of substitution points in a template."""
    return template_string.count(PLACEHOLDER)
