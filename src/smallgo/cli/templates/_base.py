"""Shared template machinery: payload loading and README boilerplate."""

from __future__ import annotations

from dataclasses import dataclass
import importlib.resources as ilr

from smallgo.cli._errors import ProjectValidationError

PLACEHOLDER = "__PROJECT_NAME__"

_SCAFFOLD_PKG = "smallgo.cli.scaffold"


def validate_project_name(project_name: str) -> str:
    """Return *project_name* unchanged, or raise if it is empty or whitespace."""
    if not project_name or not project_name.strip():
        raise ProjectValidationError("project name must not be empty")
    return project_name


def _read(template_dir: str, rel_path: str, project_name: str) -> str:
    node = ilr.files(_SCAFFOLD_PKG) / template_dir
    for part in f"{rel_path}.tmpl".split("/"):
        node = node / part
    content = node.read_text(encoding="utf-8")
    return content.replace(PLACEHOLDER, project_name)


def readme_md(project_name: str, architecture: str, structure: str, features: str) -> str:
    return f"""\
# {project_name}

A Go service built with {architecture}.

## Project Structure

This project follows the {architecture} pattern with clear separation of concerns:

```
{structure}
```

## Quick Start

### Prerequisites

- Go 1.21 or later
- MongoDB (for clean architecture template)

### Running the Service

1. **Navigate to the project:**
   ```bash
   cd {project_name}
   ```

2. **Run the service (dependencies are automatically managed):**
   ```bash
   go run cmd/server/main.go
   ```

The service will be available at `http://localhost:8080`

## API Endpoints

- `GET /health` - Health check
- `POST /users` - Create a new user
- `GET /users/{{id}}` - Get user by ID

## Features

{features}

## Architecture Benefits

- **Testability**: Easy to unit test domain logic in isolation
- **Flexibility**: Swap implementations without changing core logic
- **Maintainability**: Clear separation of concerns
- **Scalability**: Modular design supports team growth

## Testing

```bash
go test ./...
```

## Building

```bash
go build -o bin/server cmd/server/main.go
```

## Contributing

1. Follow the architecture pattern
2. Add tests for new features
3. Update documentation as needed
4. Ensure all tests pass before submitting

## License

This project is licensed under the MIT License.
"""


@dataclass(frozen=True, kw_only=True)
class ArchitectureTemplate:
    """
    A template whose Go sources ship as package resources.

    Attributes:
        name: Registry key, also accepted by ``--template``.
        label: Short title for the interactive menu.
        description: One-line summary for listings.
        files: Generated paths, each backed by ``scaffold/<name>/<path>.tmpl``.
        dependencies: Go module paths fetched after the files are written.
        structure: Directory tree shown in the generated README.
        features: Markdown bullet list shown in the generated README.
    """

    name: str
    label: str
    description: str
    files: tuple[str, ...]
    dependencies: tuple[str, ...]
    structure: str
    features: str

    def generate(self, project_name: str) -> dict[str, str]:
        """Render every file of the template for *project_name*. Performs no writes."""
        validate_project_name(project_name)
        rendered = {path: _read(self.name, path, project_name) for path in self.files}
        rendered["README.md"] = readme_md(project_name, self.name, self.structure, self.features)
        return rendered
