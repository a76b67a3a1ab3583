"""Interactive template picker drawn with Rich + simple-term-menu."""

from __future__ import annotations

import sys

from rich.console import Console
from simple_term_menu import TerminalMenu

from smallgo.cli.templates import ProjectTemplate, list_templates

_console = Console()

_QUESTION = "Select an architecture template"


def _menu_entry(position: int, template: ProjectTemplate) -> str:
    return f"{position}. {template.name}: {template.description}"


def _erase_question() -> None:
    # The ◆ question and its │ bar are the two lines above the cursor.
    sys.stdout.write("\033[2A\033[J")
    sys.stdout.flush()


def prompt_template() -> ProjectTemplate:
    """Ask for a template; entries are numbered in registry order."""
    templates = list_templates()

    _console.print(f"[bold cyan]◆[/]  {_QUESTION}")
    _console.print("[dim]│[/]")

    menu = TerminalMenu(
        [_menu_entry(i, t) for i, t in enumerate(templates, start=1)],
        menu_cursor="│  › ",
        menu_cursor_style=("fg_cyan", "bold"),
        menu_highlight_style=("fg_cyan",),
        clear_menu_on_exit=True,
    )
    index = menu.show()

    if index is None:
        _console.print("[dim]│[/]  [red]Cancelled[/]")
        raise SystemExit(1)

    selected = templates[int(index)]

    _erase_question()
    _console.print(f"[bold green]◇[/]  {_QUESTION}")
    _console.print(f"[dim]│[/]  {selected.label}")
    _console.print("[dim]│[/]")

    return selected
