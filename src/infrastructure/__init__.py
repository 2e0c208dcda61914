"""Infrastructure layer - Adapters for the domain protocols.

Structure:
- persistence/: SQLAlchemy models, Database and repositories
- security/: bcrypt password hashing and JWT tokens
- logging/: structlog console adapter

The infrastructure layer depends on the domain layer (implements protocols)
but the domain layer does NOT depend on infrastructure.
"""
