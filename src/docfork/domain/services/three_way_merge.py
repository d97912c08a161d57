"""Per-field three-way merge of a fork into its original document.

Each mergeable field is resolved independently against the base snapshot:

* original unchanged since the fork (or no base recorded): take the fork
* original changed, fork untouched: keep the original's value
* both changed since the fork: conflict, the fork's value wins

Fields are coarse grained, so there is no line or character level merge.
"""

from dataclasses import dataclass, field

from docfork.domain.entities import Document, Snapshot
from docfork.domain.value_objects import MergeField

FORK_WINS = "fork_wins"


@dataclass(frozen=True)
class Conflict:
    """Field modified on both sides since the fork was created."""

    field: MergeField
    base: str | None
    original: str
    fork: str
    resolution: str = FORK_WINS

    @property
    def message(self) -> str:
        return f"{self.field.label} was modified in both fork and original document."


@dataclass
class MergeOutcome:
    """Merged field values plus the conflicts found on the way."""

    values: dict[MergeField, str] = field(default_factory=dict)
    conflicts: list[Conflict] = field(default_factory=list)

    @property
    def has_conflicts(self) -> bool:
        return bool(self.conflicts)


def merge_field(
    name: MergeField,
    base: str | None,
    original: str,
    fork: str,
    *,
    strict_empty_base: bool = False,
) -> tuple[str, Conflict | None]:
    """Resolve one field. Returns the merged value and an optional conflict.

    With ``strict_empty_base`` an empty or missing base is compared like any
    other value instead of short-circuiting to the fork's value.
    """
    if not base:
        if not strict_empty_base:
            return fork, None
        base = ""

    if base == original:
        return fork, None
    if fork == base:
        return original, None
    return fork, Conflict(
        field=name,
        base=base,
        original=original,
        fork=fork,
    )


def merge_fields(
    base: Snapshot,
    original: Document,
    fork: Document,
    *,
    strict_empty_base: bool = False,
) -> MergeOutcome:
    """Three-way merge all mergeable fields in declaration order."""
    outcome = MergeOutcome()
    for f in MergeField:
        value, conflict = merge_field(
            f,
            base.get(f),
            original.field_value(f),
            fork.field_value(f),
            strict_empty_base=strict_empty_base,
        )
        outcome.values[f] = value
        if conflict:
            outcome.conflicts.append(conflict)
    return outcome
