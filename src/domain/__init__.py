"""Domain layer - Pure business logic.

This layer contains the core business entities, protocols (ports),
validators and annotated input types. The domain layer has NO dependencies
on any framework or infrastructure, apart from pydantic for annotated types.

Structure:
- entities/: Reference-data entities, User and Role (dataclasses)
- protocols/: Repository and service interfaces
- validators/: Pure validation functions
- enums/: Seeded role names
"""
