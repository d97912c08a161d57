"""Domain value objects."""

from docfork.domain.value_objects.actor import Actor
from docfork.domain.value_objects.disposal_policy import DisposalPolicy
from docfork.domain.value_objects.document_status import DocumentStatus
from docfork.domain.value_objects.fork_state import ForkState
from docfork.domain.value_objects.merge_field import MergeField

__all__ = [
    "Actor",
    "DisposalPolicy",
    "DocumentStatus",
    "ForkState",
    "MergeField",
]
