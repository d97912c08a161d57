"""What happens to a fork after a successful merge."""

from enum import StrEnum


class DisposalPolicy(StrEnum):
    """Post-merge disposal of a fork."""

    LOCK = "lock"  # trash the fork document, keep it visible read-only
    DELETE = "delete"  # remove the fork permanently
