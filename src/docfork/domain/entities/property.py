"""Property entity - document key-value metadata."""

from dataclasses import dataclass
from uuid import UUID


@dataclass
class Property:
    """Property - one value of a (possibly multi-valued) key on a document."""

    document_id: UUID
    key: str
    value: str
