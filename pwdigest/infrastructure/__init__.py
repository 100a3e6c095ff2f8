"""Infrastructure layer - Adapters for domain protocols.

Structure:
- logging/: Structured logging adapters (structlog)
- security/: Password digest implementation

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
