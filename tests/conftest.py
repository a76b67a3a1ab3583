"""Shared fixtures for the small-go test suite."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

import pytest

from smallgo.cli._errors import ToolchainError


class RecordingToolchain:
    """Stands in for GoToolchain and records what it was asked to do."""

    def __init__(self, fail_on: str | None = None) -> None:
        self.calls: list[tuple] = []
        self.fail_on = fail_on

    def init(self, module_name: str, root: Path) -> None:
        self.calls.append(("init", module_name, root))
        if self.fail_on == "init":
            raise ToolchainError(["go", "mod", "init", module_name], 1, "boom")

    def resolve(self, root: Path, dependencies: Sequence[str]) -> None:
        self.calls.append(("resolve", root, tuple(dependencies)))
        if self.fail_on == "resolve":
            raise ToolchainError(["go", "mod", "tidy"], 1, "boom")


@pytest.fixture
def toolchain() -> RecordingToolchain:
    return RecordingToolchain()


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    return tmp_path / "demo"


@pytest.fixture
def make_toolchain() -> type[RecordingToolchain]:
    return RecordingToolchain
