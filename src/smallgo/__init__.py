"""small-go: Go project scaffolding with hexagonal and clean architecture templates."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("small-go")
except PackageNotFoundError:
    __version__ = "0.0.0"
