"""Merge fork use case - three-way merge of a fork into its original."""

import logging
from datetime import UTC, datetime
from uuid import UUID, uuid4

from docfork.application.dto.merge_dto import MergeResult
from docfork.application.ports import UnitOfWork
from docfork.application.services.fork_manager import ForkManager
from docfork.domain.entities import FORK_KIND, AuditNote, Property, Revision
from docfork.domain.exceptions import AlreadyMerged, InvalidFork, InvalidOriginal, Mismatch
from docfork.domain.services.three_way_merge import merge_fields
from docfork.domain.value_objects import Actor
from docfork.domain.value_objects.property_key import is_reserved_key

logger = logging.getLogger(__name__)


class MergeForkUseCase:
    """Merge a fork back into its original document.

    Mergeable fields are resolved per field against the base snapshot;
    on conflict the fork wins and the conflict is reported. Properties and
    taxonomy terms are replaced wholesale with the fork's.
    """

    def __init__(
        self,
        unit_of_work_factory: type,
        fork_manager: ForkManager,
        *,
        strict_empty_base: bool = False,
        document_url_template: str = "/v1/documents/{document_id}",
    ) -> None:
        self._uow_factory = unit_of_work_factory
        self._fork_manager = fork_manager
        self._strict_empty_base = strict_empty_base
        self._document_url_template = document_url_template

    async def execute(self, actor: Actor, fork_id: UUID, original_id: UUID) -> MergeResult:
        """Merge fork into original. Conflicts do not fail the merge."""
        async with self._uow_factory() as uow:
            fork = await uow.forks.get_for_update(fork_id)
            fork_document = (
                await uow.documents.get_by_id(fork_id, include_deleted=True) if fork else None
            )
            if not fork or not fork_document or fork_document.kind != FORK_KIND:
                raise InvalidFork("Invalid fork.")

            original = await uow.documents.get_by_id(original_id)
            if not original:
                raise InvalidOriginal("Original document not found.")
            if fork.original_id != original_id:
                raise Mismatch("Fork does not belong to this original document.")
            if fork.is_merged:
                raise AlreadyMerged("This fork has already been merged.")

            now = datetime.now(UTC)
            await uow.revisions.create(Revision.of(original, now))

            outcome = merge_fields(
                fork.base_snapshot,
                original,
                fork_document,
                strict_empty_base=self._strict_empty_base,
            )
            await uow.documents.update_fields(original_id, outcome.values, now)

            await self._replace_properties(uow, fork_id, original_id)
            await self._replace_terms(uow, fork_id, original_id)
            image_id = await uow.properties.get_primary_image(fork_id)
            if image_id:
                await uow.properties.set_primary_image(original_id, image_id)

            fork = await self._fork_manager.transition_to_merged(uow, fork, actor.user_id)
            await self._fork_manager.dispose(uow, fork)

            await uow.notes.add(
                AuditNote(
                    id=uuid4(),
                    document_id=original_id,
                    author_id=actor.user_id,
                    author_name=actor.name,
                    author_email=actor.email,
                    content=(
                        f'Fork "{fork_document.title}" (ID: {fork.id}) '
                        "was merged into this document."
                    ),
                    created_at=now,
                )
            )

        logger.info(
            "Merged fork %s into %s by %s with %d conflict(s)",
            fork_id,
            original_id,
            actor.user_id,
            len(outcome.conflicts),
        )
        return MergeResult(
            original_id=original_id,
            original_url=self._document_url_template.format(document_id=original_id),
            conflicts=outcome.conflicts,
        )

    async def _replace_properties(
        self, uow: UnitOfWork, fork_id: UUID, original_id: UUID
    ) -> None:
        """Replace the original's non-reserved properties with the fork's."""
        for p in await uow.properties.list_by_document(original_id):
            if not is_reserved_key(p.key):
                await uow.properties.delete_key(original_id, p.key)
        properties = [
            Property(document_id=original_id, key=p.key, value=p.value)
            for p in await uow.properties.list_by_document(fork_id)
            if not is_reserved_key(p.key)
        ]
        if properties:
            await uow.properties.create_batch(properties)

    async def _replace_terms(self, uow: UnitOfWork, fork_id: UUID, original_id: UUID) -> None:
        """Replace the original's taxonomy terms with the fork's."""
        taxonomies = set(await uow.taxonomies.list_taxonomies(original_id))
        taxonomies.update(await uow.taxonomies.list_taxonomies(fork_id))
        for taxonomy in sorted(taxonomies):
            terms = await uow.taxonomies.get_terms(fork_id, taxonomy)
            await uow.taxonomies.set_terms(original_id, taxonomy, terms)
