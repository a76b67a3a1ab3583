"""Exceptions raised while scaffolding a project."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

from smallgo.cli._types import ScaffoldStep


class ScaffoldError(Exception):
    """Base class for every failure of a scaffold operation.

    Attributes:
        step: The last state reached before the failure.
    """

    def __init__(self, message: str, *, step: ScaffoldStep = ScaffoldStep.START) -> None:
        super().__init__(message)
        self.step = step


class TemplateNotFoundError(ScaffoldError):
    """The requested template name is not registered."""

    def __init__(self, name: str, available: Sequence[str]) -> None:
        valid = ", ".join(f"'{n}'" for n in available)
        super().__init__(f"unknown template {name!r}. Valid templates: {valid}")
        self.name = name
        self.available = list(available)


class ProjectExistsError(ScaffoldError):
    """The target path exists and is not an empty directory."""

    def __init__(self, path: Path) -> None:
        super().__init__(f"'{path}' already exists and is not an empty directory")
        self.path = path


class ProjectValidationError(ScaffoldError, ValueError):
    """A project identifier or a generated file mapping failed validation."""


class MaterializeError(ScaffoldError):
    """Creating a directory or writing a file failed."""

    def __init__(self, path: Path, cause: OSError) -> None:
        reason = cause.strerror or str(cause)
        super().__init__(f"failed to write {path}: {reason}")
        self.path = path


class ToolchainError(ScaffoldError):
    """An external Go toolchain command could not run or exited non-zero."""

    def __init__(
        self,
        command: Sequence[str],
        returncode: int | None,
        output: str = "",
    ) -> None:
        cmd = " ".join(command)
        if returncode is None:
            message = f"could not run '{cmd}'"
        else:
            message = f"'{cmd}' exited with status {returncode}"
        if output.strip():
            message = f"{message}\n{output.rstrip()}"
        super().__init__(message)
        self.command = list(command)
        self.returncode = returncode
        self.output = output
