"""Runs one scaffold operation from template lookup to dependency resolution."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
import logging
from pathlib import Path
from typing import Protocol

from smallgo.cli._errors import (
    MaterializeError,
    ProjectExistsError,
    ScaffoldError,
    TemplateNotFoundError,
)
from smallgo.cli._renderer import materialize, plan_files
from smallgo.cli._types import ScaffoldStep
from smallgo.cli.templates import ProjectTemplate, find_template, template_names

logger = logging.getLogger(__name__)


class ModuleInitializer(Protocol):
    def init(self, module_name: str, root: Path) -> None: ...


class DependencyResolver(Protocol):
    def resolve(self, root: Path, dependencies: Sequence[str]) -> None: ...


@dataclass(frozen=True)
class ScaffoldResult:
    """Outcome of a successful scaffold operation."""

    root: Path
    template: ProjectTemplate
    files: list[Path]


def _create_root(root: Path) -> None:
    try:
        if root.exists() and (not root.is_dir() or any(root.iterdir())):
            raise ProjectExistsError(root)
        root.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise MaterializeError(root, exc) from exc


def scaffold_project(
    project_dir: Path,
    template_name: str,
    *,
    initializer: ModuleInitializer,
    resolver: DependencyResolver,
    on_step: Callable[[ScaffoldStep], None] | None = None,
) -> ScaffoldResult:
    """
    Create a new Go project at *project_dir* from the template *template_name*.

    The last component of *project_dir* is the Go module name. Files are
    generated and validated before anything touches the disk; every later
    failure aborts immediately and leaves whatever was already written.

    Raises:
        ScaffoldError: With ``step`` set to the last state reached.
    """
    step = ScaffoldStep.START

    def advance(new_step: ScaffoldStep) -> None:
        nonlocal step
        step = new_step
        logger.debug("scaffold step: %s", new_step.value)
        if on_step is not None:
            on_step(new_step)

    try:
        template = find_template(template_name)
        if template is None:
            raise TemplateNotFoundError(template_name, template_names())

        module_name = project_dir.name
        files = template.generate(module_name)
        plan_files(project_dir, files)

        _create_root(project_dir)
        advance(ScaffoldStep.DIR_CREATED)

        initializer.init(module_name, project_dir)
        advance(ScaffoldStep.MODULE_INITIALIZED)

        written = materialize(project_dir, files)
        advance(ScaffoldStep.FILES_WRITTEN)

        resolver.resolve(project_dir, template.dependencies)
        advance(ScaffoldStep.DEPENDENCIES_RESOLVED)
    except ScaffoldError as exc:
        exc.step = step
        logger.debug("scaffold failed after %s: %s", step.value, exc)
        if on_step is not None:
            on_step(ScaffoldStep.FAILED)
        raise

    advance(ScaffoldStep.DONE)
    return ScaffoldResult(root=project_dir, template=template, files=written)
