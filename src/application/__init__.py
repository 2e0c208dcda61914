"""Application layer - Use cases and orchestration.

Structure:
- commands/: Auth and user-administration commands plus auth handlers
- services/: Generic entity CRUD service and user/role administration

The application layer orchestrates domain logic and repositories; it never
imports infrastructure.
"""
