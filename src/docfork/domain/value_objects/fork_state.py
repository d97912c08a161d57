"""Fork lifecycle state."""

from enum import StrEnum


class ForkState(StrEnum):
    """State of a fork. Transitions only draft -> merged."""

    DRAFT = "draft"
    MERGED = "merged"
