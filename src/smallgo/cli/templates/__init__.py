"""Template registry for project scaffolding."""

from __future__ import annotations

from typing import Protocol

from smallgo.cli.templates._base import ArchitectureTemplate
from smallgo.cli.templates._clean import CLEAN
from smallgo.cli.templates._hexagonal import HEXAGONAL


class ProjectTemplate(Protocol):
    """Protocol for templates. Each exposes a generate() returning path -> content."""

    @property
    def name(self) -> str: ...

    @property
    def label(self) -> str: ...

    @property
    def description(self) -> str: ...

    @property
    def dependencies(self) -> tuple[str, ...]: ...

    def generate(self, project_name: str) -> dict[str, str]: ...


# Order is the menu order; interactive selection is positional.
_TEMPLATES: tuple[ProjectTemplate, ...] = (HEXAGONAL, CLEAN)

if len({t.name for t in _TEMPLATES}) != len(_TEMPLATES):
    raise RuntimeError("template names must be unique")


def list_templates() -> tuple[ProjectTemplate, ...]:
    """Return every registered template in registry order."""
    return _TEMPLATES


def template_names() -> list[str]:
    return [t.name for t in _TEMPLATES]


def find_template(name: str) -> ProjectTemplate | None:
    """Return the template registered under *name* (case-sensitive), or None."""
    for template in _TEMPLATES:
        if template.name == name:
            return template
    return None


__all__ = [
    "ArchitectureTemplate",
    "ProjectTemplate",
    "find_template",
    "list_templates",
    "template_names",
]
