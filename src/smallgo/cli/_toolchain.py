"""Go toolchain invocations: module initialization and dependency resolution."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
import logging
from pathlib import Path
import subprocess

from smallgo.cli._errors import ToolchainError

logger = logging.getLogger(__name__)


@dataclass(kw_only=True)
class ToolchainConfig:
    """
    Configuration for the external Go toolchain.

    Attributes:
        go_binary: Executable name or path of the ``go`` command.
        timeout: Seconds to wait for each command, or None to wait forever.
    """

    go_binary: str = "go"
    timeout: float | None = None

    def __post_init__(self) -> None:
        if not self.go_binary.strip():
            raise ValueError("go_binary must not be empty.")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}.")


class GoToolchain:
    """Runs ``go mod init``, ``go get`` and ``go mod tidy`` inside the project root."""

    def __init__(self, config: ToolchainConfig | None = None) -> None:
        self.config = config or ToolchainConfig()

    def init(self, module_name: str, root: Path) -> None:
        self._run(["mod", "init", module_name], root)

    def resolve(self, root: Path, dependencies: Sequence[str]) -> None:
        if dependencies:
            self._run(["get", *dependencies], root)
        self._run(["mod", "tidy"], root)

    def _run(self, args: list[str], cwd: Path) -> None:
        command = [self.config.go_binary, *args]
        logger.debug("running %s in %s", " ".join(command), cwd)
        try:
            result = subprocess.run(
                command,
                cwd=cwd,
                capture_output=True,
                text=True,
                timeout=self.config.timeout,
                check=False,
            )
        except FileNotFoundError as exc:
            raise ToolchainError(command, None, str(exc)) from exc
        except subprocess.TimeoutExpired as exc:
            raise ToolchainError(command, None, f"timed out after {exc.timeout}s") from exc

        if result.returncode != 0:
            output = "\n".join(part for part in (result.stdout, result.stderr) if part)
            raise ToolchainError(command, result.returncode, output)
        if result.stderr:
            logger.debug("%s", result.stderr.rstrip())


class NullToolchain:
    """Skips every toolchain step."""

    def init(self, module_name: str, root: Path) -> None:
        logger.debug("skipping module initialization for %s", module_name)

    def resolve(self, root: Path, dependencies: Sequence[str]) -> None:
        logger.debug("skipping dependency resolution in %s", root)
