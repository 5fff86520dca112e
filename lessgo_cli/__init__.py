"""lessgo-cli: scaffolding tool for LessGo web applications."""

__version__ = "v1.0.3"
