"""Enums shared by the scaffolder and the CLI."""

from enum import Enum


class ScaffoldStep(str, Enum):
    """States of a scaffold operation, in the order they are reached."""

    START = "start"
    DIR_CREATED = "dir-created"
    MODULE_INITIALIZED = "module-initialized"
    FILES_WRITTEN = "files-written"
    DEPENDENCIES_RESOLVED = "dependencies-resolved"
    DONE = "done"
    FAILED = "failed"

    @property
    def label(self) -> str:
        labels: dict[ScaffoldStep, str] = {
            ScaffoldStep.START: "Resolving template",
            ScaffoldStep.DIR_CREATED: "Created project directory",
            ScaffoldStep.MODULE_INITIALIZED: "Initialized Go module",
            ScaffoldStep.FILES_WRITTEN: "Wrote template files",
            ScaffoldStep.DEPENDENCIES_RESOLVED: "Resolved dependencies",
            ScaffoldStep.DONE: "Done",
            ScaffoldStep.FAILED: "Failed",
        }
        return labels[self]
