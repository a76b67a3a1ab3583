"""Clean architecture template with a MongoDB-backed repository."""

from smallgo.cli.templates._base import ArchitectureTemplate

_STRUCTURE = """\
.
├── cmd/server/main.go                    # Application entry point
├── internal/                             # Internal application layers
│   ├── domain/                           # Domain layer (entities & services)
│   │   ├── entity/                       # Domain entities
│   │   └── service/                      # Domain services
│   ├── storage/                          # Data access layer
│   │   ├── interfaces/                   # Repository interfaces
│   │   └── mongo/                        # MongoDB implementations
│   ├── handler/                          # HTTP handlers
│   │   ├── rest/                         # REST API handlers
│   │   │   ├── dto/                      # Data Transfer Objects
│   │   │   ├── http/                     # HTTP handlers
│   │   │   └── mapper/                   # Entity-DTO mappers
│   │   └── middleware/                   # HTTP middleware
│   └── glue/                             # Application glue
│       └── routing/                      # Route definitions
├── initiator/                            # Dependency injection
├── platform/                             # Platform utilities
│   ├── utils/                            # Utility functions
│   └── mongo/                            # MongoDB utilities
├── go.mod
├── go.sum
└── README.md"""

_FEATURES = """\
- **Clean Architecture**: Domain-Driven Design with clear layer separation
- **MongoDB Integration**: Production-ready MongoDB repository implementation
- **DTO Pattern**: Clean data transfer objects with validation
- **Mapper Pattern**: Entity-DTO mapping for clean API responses
- **Middleware Support**: Extensible middleware architecture
- **Structured Logging**: Production-ready logging with Zap
- **Dependency Injection**: Uber FX for clean dependency management"""

CLEAN = ArchitectureTemplate(
    name="clean",
    label="Clean Architecture",
    description="Clean Architecture with Domain-Driven Design (DDD) principles",
    files=(
        "cmd/server/main.go",
        "internal/domain/entity/user.go",
        "internal/domain/service/user_service.go",
        "internal/storage/interfaces/user_repository.go",
        "internal/storage/mongo/user_repository.go",
        "internal/handler/rest/dto/user_dto.go",
        "internal/handler/rest/http/user_handler.go",
        "internal/handler/rest/mapper/user_mapper.go",
        "internal/handler/middleware/auth.go",
        "internal/glue/routing/routes.go",
        "initiator/initiator.go",
        "initiator/service.go",
        "initiator/persistence.go",
        "initiator/handler.go",
        "initiator/config.go",
        "initiator/logger.go",
        "platform/utils/response.go",
        "platform/mongo/connection.go",
    ),
    dependencies=(
        "github.com/go-chi/chi/v5",
        "go.uber.org/fx",
        "go.uber.org/zap",
        "go.mongodb.org/mongo-driver/mongo",
        "go.mongodb.org/mongo-driver/bson",
    ),
    structure=_STRUCTURE,
    features=_FEATURES,
)
