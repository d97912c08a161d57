"""Acting user passed explicitly into operations."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Actor:
    """User performing a fork, edit or merge."""

    user_id: str
    display_name: str | None = None
    email: str | None = None

    @property
    def name(self) -> str:
        return self.display_name or self.user_id
