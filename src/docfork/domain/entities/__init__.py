"""Domain entities."""

from docfork.domain.entities.audit_note import AuditNote
from docfork.domain.entities.document import Document
from docfork.domain.entities.fork import FORK_KIND, Fork
from docfork.domain.entities.property import Property
from docfork.domain.entities.revision import Revision
from docfork.domain.entities.snapshot import Snapshot

__all__ = [
    "FORK_KIND",
    "AuditNote",
    "Document",
    "Fork",
    "Property",
    "Revision",
    "Snapshot",
]
