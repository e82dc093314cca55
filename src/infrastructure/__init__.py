"""Infrastructure layer - Adapters for external systems.

Implementations of domain protocols (ports):
- cache/: Redis cache adapter and key formats
- persistence/: PostgreSQL models, session management and repositories
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
