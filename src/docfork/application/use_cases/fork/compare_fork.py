"""Compare fork use case - read-only side-by-side view."""

from uuid import UUID

from docfork.application.dto.comparison_dto import ComparisonView, FieldComparison
from docfork.domain.exceptions import NotFound, OriginalDeleted
from docfork.domain.value_objects import MergeField


class CompareForkUseCase:
    """Compare a fork with the current state of its original.

    Unlike the merge, this ignores the base snapshot: it shows what a merge
    would overwrite, not what diverged since the fork was created.
    """

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, fork_id: UUID) -> ComparisonView:
        async with self._uow_factory() as uow:
            fork = await uow.forks.get_by_id(fork_id)
            fork_document = (
                await uow.documents.get_by_id(fork_id, include_deleted=True) if fork else None
            )
            if not fork or not fork_document:
                raise NotFound("Fork", str(fork_id))

            original = await uow.documents.get_by_id(fork.original_id)
            if not original:
                raise OriginalDeleted("Original document has been deleted.")

        return ComparisonView(
            fork_id=fork.id,
            original_id=original.id,
            fields=[
                FieldComparison(
                    field=f,
                    original_value=original.field_value(f),
                    fork_value=fork_document.field_value(f),
                )
                for f in MergeField
            ],
            original_modified_at=original.modified_at,
            fork_modified_at=fork_document.modified_at,
        )
