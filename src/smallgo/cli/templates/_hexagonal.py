"""Hexagonal architecture (ports & adapters) template."""

from smallgo.cli.templates._base import ArchitectureTemplate

_STRUCTURE = """\
.
├── cmd/server/main.go                    # Application entry point
├── internal/                             # Inner Hexagon (Domain, Application, Ports)
│   ├── domain/                           # Pure Domain Models
│   ├── application/                      # Application Services
│   └── ports/                            # Ports (Inbound & Outbound)
├── adapters/                             # Outer Hexagon (Adapters)
│   ├── inbound/http/                     # HTTP handlers with Chi router
│   └── outbound/persistence/             # Repository implementation
├── initiators/                           # Dependency Injection & Lifecycle
├── go.mod
├── go.sum
└── README.md"""

_FEATURES = """\
- **Hexagonal Architecture**: Strict separation between domain, application, and infrastructure
- **Chi Router**: Modern HTTP routing with middleware support
- **Uber FX**: Dependency injection and lifecycle management
- **Zap Logger**: Structured logging with production-ready configuration
- **In-memory persistence**: Simple in-memory storage for quick development
- **Clean architecture**: Strict separation of concerns
- **Ready to run**: Compiles and runs immediately with automatic dependency management"""

HEXAGONAL = ArchitectureTemplate(
    name="hexagonal",
    label="Hexagonal Architecture",
    description="Hexagonal Architecture (Ports & Adapters) with Uber FX and Chi Router",
    files=(
        "cmd/server/main.go",
        "internal/domain/user.go",
        "internal/application/user_service.go",
        "internal/ports/inbound/user_service.go",
        "internal/ports/outbound/user_repository.go",
        "adapters/inbound/http/user_handler.go",
        "adapters/inbound/http/router.go",
        "adapters/outbound/persistence/user_repository.go",
        "initiators/app.go",
        "initiators/http.go",
        "initiators/persistence.go",
    ),
    dependencies=(
        "github.com/go-chi/chi/v5",
        "go.uber.org/fx",
        "go.uber.org/zap",
    ),
    structure=_STRUCTURE,
    features=_FEATURES,
)
