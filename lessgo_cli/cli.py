"""lessgo-cli command-line entry point.

Usage::

    lessgo new                      # prompts for the project name
    lessgo new --name demo -o ./projects
    lessgo --version
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import NoReturn

from rich.prompt import Prompt

from lessgo_cli import __version__
from lessgo_cli.config import Config
from lessgo_cli.scaffolder import ProjectContext, ProjectGenerator, ScaffoldError, list_blueprints
from lessgo_cli.utils import (
    console,
    print_banner,
    print_error,
    print_success,
    print_summary_table,
    setup_logging,
)

_LOGO_PATH = Path(__file__).parent / "logo.txt"


class _Parser(argparse.ArgumentParser):
    """Argument parser whose usage errors exit with status 1."""

    def error(self, message: str) -> NoReturn:
        self.print_usage(sys.stderr)
        print_error(f"{self.prog}: error: {message}")
        sys.exit(1)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="lessgo",
        description="lessgo-cli -- scaffold a new LessGo web application",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  lessgo new\n"
            "  lessgo new --name demo --output ./projects\n"
            "  lessgo --version\n"
        ),
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"lessgo-cli version {__version__}",
        help="Print the version number",
    )

    subparsers = parser.add_subparsers(dest="command", metavar="command")
    new = subparsers.add_parser("new", help="Create a new project")
    new.add_argument(
        "--name", "-n",
        default=None,
        help="Project name (prompted for if omitted)",
    )
    new.add_argument(
        "--output", "-o",
        default=None,
        help="Directory the project folder is created in (default: .)",
    )
    new.add_argument(
        "--blueprint",
        default=None,
        choices=list_blueprints(),
        help="Project layout to generate (default: default)",
    )
    new.add_argument(
        "--go-binary",
        default=None,
        help="Go executable used for go mod init/tidy (default: go)",
    )
    new.add_argument(
        "--skip-bootstrap",
        action="store_true",
        default=None,
        help="Write the files but do not run go mod init/tidy",
    )
    new.add_argument(
        "--verbose", "-v",
        action="store_true",
        default=None,
        help="Log every scaffold step",
    )
    return parser


def validate_project_name(name: str) -> str | None:
    """Return an error message if *name* cannot be used, else ``None``."""
    if not name.strip():
        return "Project name must not be empty."
    try:
        name.encode("utf-8")
    except UnicodeEncodeError:
        return "Project name must be valid UTF-8."
    if any(ch.isspace() for ch in name):
        return f"Project name {name!r} must not contain whitespace."
    if name in (".", "..") or "/" in name or "\\" in name:
        return f"Project name {name!r} must be a single directory name."
    return None


def _config_from_args(args: argparse.Namespace) -> Config:
    config = Config.from_env()
    overrides = {
        "output_dir": Path(args.output) if args.output else None,
        "blueprint": args.blueprint,
        "go_binary": args.go_binary,
        "skip_bootstrap": args.skip_bootstrap,
        "verbose": args.verbose,
    }
    return config.model_copy(update={k: v for k, v in overrides.items() if v is not None})


def _load_logo() -> str:
    return _LOGO_PATH.read_text(encoding="utf-8")


def run_new(args: argparse.Namespace) -> int:
    """Handle ``lessgo new``.  Returns the process exit status."""
    config = _config_from_args(args)
    setup_logging(config.verbose)

    name = args.name
    if name is None:
        try:
            name = Prompt.ask(
                "Enter project name", console=console, default="", show_default=False
            )
        except (EOFError, KeyboardInterrupt):
            console.print()
            print_error("No project name entered; aborting.")
            return 1
    name = name.strip()

    problem = validate_project_name(name)
    if problem:
        print_error(problem)
        return 1

    print_banner(_load_logo(), f"🚀 Initializing your Less{name} project...")

    try:
        generator = ProjectGenerator.from_config(config)
    except ScaffoldError as exc:
        print_error(f"❌ {exc}")
        return 1

    context = ProjectContext.for_name(name, config.output_dir)
    result = asyncio.run(generator.generate(context))

    if not result.success:
        print_error(f"❌ {result.failure_message()}")
        return 1

    if config.verbose:
        print_summary_table(
            {
                "Project root": str(result.project_root),
                "Files written": str(len(result.files_written)),
                "Commands run": ", ".join(result.commands_run) or "(skipped)",
            },
            title="Scaffold summary",
        )

    print_success("🎉 Project scaffold created successfully!")
    entry = (config.project_root(name) / "app" / "cmd" / "main.go").as_posix()
    console.print(f"🚀 Spin up your new LessGo app by running: go run {entry}", markup=False)
    return 0


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for ``lessgo`` and ``python -m lessgo_cli``."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        print_error("Expected 'new' command.")
        sys.exit(1)

    sys.exit(run_new(args))


if __name__ == "__main__":
    main()
