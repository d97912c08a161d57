"""Repository ports."""

from docfork.application.ports.repositories.audit_note_repository import (
    AuditNoteRepository,
)
from docfork.application.ports.repositories.document_repository import (
    DocumentRepository,
)
from docfork.application.ports.repositories.fork_repository import ForkRepository
from docfork.application.ports.repositories.property_repository import (
    PropertyRepository,
)
from docfork.application.ports.repositories.revision_repository import (
    RevisionRepository,
)
from docfork.application.ports.repositories.taxonomy_repository import (
    TaxonomyRepository,
)

__all__ = [
    "AuditNoteRepository",
    "DocumentRepository",
    "ForkRepository",
    "PropertyRepository",
    "RevisionRepository",
    "TaxonomyRepository",
]
