"""Role domain entity."""

from dataclasses import dataclass


@dataclass
class Role:
    """Named role granted to users.

    Role names are case-sensitive and globally unique ("Admin" != "admin").

    Attributes:
        name: Role name (max 50 characters).
        id: Store-assigned identifier (None until persisted).
    """

    name: str
    id: int | None = None
