"""Document publication status."""

from enum import StrEnum


class DocumentStatus(StrEnum):
    """Status of a document in the store."""

    DRAFT = "draft"
    PUBLISHED = "published"
    TRASHED = "trashed"
