"""Writes a rendered path -> content mapping to files on disk."""

from __future__ import annotations

from collections.abc import Mapping
import logging
import os
from pathlib import Path, PurePosixPath

from smallgo.cli._errors import MaterializeError, ProjectValidationError

logger = logging.getLogger(__name__)


def _normalize(rel_path: str) -> str:
    if not rel_path or not rel_path.strip():
        raise ProjectValidationError("generated file path must not be empty")
    posix = rel_path.replace("\\", "/")
    if PurePosixPath(posix).is_absolute() or Path(rel_path).is_absolute():
        raise ProjectValidationError(f"generated file path {rel_path!r} is absolute")
    return os.path.normpath(posix).replace(os.sep, "/")


def plan_files(root: Path, files: Mapping[str, str]) -> list[tuple[str, Path]]:
    """
    Validate *files* against *root* without touching the disk.

    Every key must be a relative path that stays strictly inside *root* once
    joined and resolved, and no two keys may normalize to the same path.

    Returns:
        ``(key, target path)`` pairs sorted by normalized path.

    Raises:
        ProjectValidationError: On an empty, absolute, escaping or duplicate path.
    """
    resolved_root = root.resolve()
    seen: dict[str, str] = {}
    plan: list[tuple[str, str, Path]] = []

    for rel_path in files:
        normalized = _normalize(rel_path)
        target = (resolved_root / normalized).resolve()
        if target == resolved_root or not target.is_relative_to(resolved_root):
            raise ProjectValidationError(f"generated file path {rel_path!r} escapes {root}")
        if normalized in seen:
            raise ProjectValidationError(
                f"generated file paths {seen[normalized]!r} and {rel_path!r} collide"
            )
        seen[normalized] = rel_path
        plan.append((normalized, rel_path, root / normalized))

    plan.sort(key=lambda entry: entry[0])
    return [(rel_path, target) for _, rel_path, target in plan]


def materialize(root: Path, files: Mapping[str, str]) -> list[Path]:
    """
    Write every entry of *files* under *root*. Returns the written paths in order.

    The whole mapping is validated first, so a bad path means nothing is
    written. After that, the first I/O error aborts; files already written
    are left in place.
    """
    plan = plan_files(root, files)
    written: list[Path] = []

    for rel_path, target in plan:
        content = files[rel_path]
        try:
            target.parent.mkdir(parents=True, exist_ok=True)
            target.write_text(content, encoding="utf-8", newline="")
        except OSError as exc:
            raise MaterializeError(target, exc) from exc
        logger.debug("wrote %s (%d bytes)", target, len(content))
        written.append(target)

    return written
