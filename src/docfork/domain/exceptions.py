"""Domain exceptions."""


class DocForkError(Exception):
    """Base exception for docfork."""

    pass


class NotFound(DocForkError):
    """Requested resource was not found."""

    def __init__(self, entity: str, identifier: str) -> None:
        super().__init__(f"{entity} not found: {identifier}")
        self.entity = entity
        self.identifier = identifier


class InvalidFork(DocForkError):
    """Fork is missing or the referenced document is not a fork."""

    pass


class InvalidOriginal(DocForkError):
    """Original document referenced by a merge request does not exist."""

    pass


class Mismatch(DocForkError):
    """Fork does not belong to the supplied original document."""

    pass


class AlreadyMerged(DocForkError):
    """Fork has already been merged."""

    pass


class OriginalDeleted(DocForkError):
    """Original document of the fork has been deleted."""

    pass


class ForkLocked(DocForkError):
    """Fork is merged or locked and can no longer be edited."""

    pass


class ValidationError(DocForkError):
    """Validation failed for input data."""

    pass


class StoreError(DocForkError):
    """Underlying persistence failure."""

    pass
