"""Typer CLI application for small-go."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from typer import Argument, Exit, Option, Typer

import smallgo
from smallgo.cli._errors import ScaffoldError
from smallgo.cli._prompts import prompt_template
from smallgo.cli._scaffolder import scaffold_project
from smallgo.cli._toolchain import GoToolchain, NullToolchain, ToolchainConfig
from smallgo.cli._types import ScaffoldStep
from smallgo.cli.templates import ProjectTemplate, find_template, list_templates

app = Typer(add_completion=False, context_settings={"help_option_names": ["-h", "--help"]})
_console = Console()


def _version_callback(value: bool) -> None:
    if value:
        _console.print(f"small-go {smallgo.__version__}")
        raise Exit()


@app.callback()
def main(
    version: Annotated[
        bool,
        Option(
            "--version",
            help="Show the version and exit.",
            callback=_version_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """small-go — Go project scaffolds with hexagonal or clean architecture."""


def _setup_logging(verbose: bool) -> None:
    logger = logging.getLogger("smallgo")
    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _print_templates() -> None:
    _console.print()
    _console.print("[bold cyan]◆[/]  Available templates")
    _console.print("[dim]│[/]")
    for i, t in enumerate(list_templates(), start=1):
        _console.print(f"[dim]│[/]  {i}. [bold cyan]{t.name}[/]: {t.description}")
        _console.print("[dim]│[/]")
    _console.print()


def _list_templates_callback(value: bool) -> None:
    if value:
        _print_templates()
        raise Exit()


def _print_step(step: ScaffoldStep) -> None:
    if step in (ScaffoldStep.START, ScaffoldStep.DONE, ScaffoldStep.FAILED):
        return
    _console.print(f"[dim]│[/]  [green]✓[/] {step.label}")


@app.command("list")
def list_command() -> None:
    """List available architecture templates."""
    _print_templates()


@app.command()
def new(
    project_name: Annotated[str, Argument(help="Name of the project directory and Go module")],
    template_str: Annotated[
        str | None,
        Option(
            "--template",
            "-t",
            help="Architecture template. Run with --list-templates / -l to see all options.",
            show_default=False,
        ),
    ] = None,
    no_go: Annotated[
        bool,
        Option("--no-go", help="Only write files; skip 'go mod init' and dependency resolution."),
    ] = False,
    go_bin: Annotated[
        str,
        Option("--go-bin", envvar="SMALL_GO_GO_BIN", help="Go executable to invoke."),
    ] = "go",
    timeout: Annotated[
        float | None,
        Option(
            "--timeout",
            envvar="SMALL_GO_TIMEOUT",
            help="Seconds to wait for each go command.",
            show_default=False,
        ),
    ] = None,
    verbose: Annotated[bool, Option("--verbose", "-v", help="Log every step.")] = False,
    list_templates_: Annotated[
        bool,
        Option(
            "--list-templates",
            "-l",
            help="List all available templates and exit.",
            callback=_list_templates_callback,
            is_eager=True,
            expose_value=False,
        ),
    ] = False,
) -> None:
    """Create a new Go project with the selected architecture template."""
    _setup_logging(verbose)
    project_dir = Path(project_name)

    template: ProjectTemplate | None = None
    if template_str is not None:
        template = find_template(template_str)
        if template is None:
            valid = ", ".join(f"'{t.name}'" for t in list_templates())
            _console.print()
            _console.print(
                f"[bold red]Error:[/] [bold]{escape(repr(template_str))}[/] is not a valid template."
            )
            _console.print(f"[dim]Valid values:[/] {valid}")
            _print_templates()
            raise Exit(code=2)

    try:
        config = ToolchainConfig(go_binary=go_bin, timeout=timeout)
    except ValueError as exc:
        _console.print(f"[bold red]Error:[/] {escape(str(exc))}")
        raise Exit(code=2) from None

    # Header
    _console.print()
    _console.print(f"[bold cyan]●[/]  small-go v{smallgo.__version__}")
    _console.print("[dim]│[/]")

    if template is None:
        template = prompt_template()
    else:
        _console.print("[bold green]◇[/]  Select an architecture template")
        _console.print(f"[dim]│[/]  {template.label}")
        _console.print("[dim]│[/]")

    toolchain = NullToolchain() if no_go else GoToolchain(config)

    _console.print(f"[bold green]◇[/]  Creating {escape(project_name)}/...")

    try:
        result = scaffold_project(
            project_dir,
            template.name,
            initializer=toolchain,
            resolver=toolchain,
            on_step=_print_step,
        )
    except ScaffoldError as exc:
        _console.print("[dim]│[/]")
        _console.print(
            f"[bold red]Error:[/] failed after step '{exc.step.value}': {escape(str(exc))}"
        )
        raise Exit(code=1) from None

    _console.print("[dim]│[/]")
    for path in result.files:
        _console.print(f"[dim]│[/]  {path.relative_to(result.root).as_posix()}")

    _console.print("[dim]│[/]")
    _console.print(f"[bold cyan]●[/]  Done! cd {escape(project_name)} && go run cmd/server/main.go")
    _console.print()
