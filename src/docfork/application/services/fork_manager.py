"""Fork manager - creation, state transition and disposal of forks."""

import logging
from collections.abc import Iterable
from dataclasses import replace
from datetime import UTC, datetime
from uuid import UUID, uuid4

from docfork.application.ports import UnitOfWork
from docfork.domain.entities import FORK_KIND, Document, Fork, Property, Snapshot
from docfork.domain.exceptions import AlreadyMerged, NotFound, ValidationError
from docfork.domain.value_objects import Actor, DisposalPolicy, DocumentStatus, ForkState
from docfork.domain.value_objects.property_key import is_copyable_key

logger = logging.getLogger(__name__)


class ForkManager:
    """Owns the fork lifecycle: draft on creation, merged once, then disposed."""

    def __init__(
        self,
        forkable_kinds: Iterable[str] = ("post", "page"),
        disposal_policy: DisposalPolicy = DisposalPolicy.LOCK,
    ) -> None:
        self._forkable_kinds = frozenset(forkable_kinds) - {FORK_KIND}
        self._disposal_policy = disposal_policy

    @property
    def disposal_policy(self) -> DisposalPolicy:
        return self._disposal_policy

    async def create_fork(self, uow: UnitOfWork, original_id: UUID, actor: Actor) -> Fork:
        """Create a draft fork of a document and snapshot its mergeable fields."""
        original = await uow.documents.get_by_id(original_id)
        if not original:
            raise NotFound("Document", str(original_id))
        if original.kind not in self._forkable_kinds:
            raise ValidationError(f"Documents of kind '{original.kind}' cannot be forked")

        now = datetime.now(UTC)
        fork_id = uuid4()
        fork_document = Document(
            id=fork_id,
            kind=FORK_KIND,
            title=original.title,
            content=original.content,
            excerpt=original.excerpt,
            status=DocumentStatus.DRAFT,
            created_at=now,
            modified_at=now,
            author_id=actor.user_id,
        )
        fork = Fork(
            id=fork_id,
            original_id=original.id,
            original_kind=original.kind,
            state=ForkState.DRAFT,
            base_snapshot=Snapshot.of(original),
            created_at=now,
            created_by=actor.user_id,
        )

        await uow.documents.create(fork_document)
        await uow.forks.create(fork)
        await self._copy_properties(uow, original.id, fork_id)
        await self._copy_terms(uow, original.id, fork_id)

        logger.info(
            "Created fork %s of %s %s for user %s",
            fork_id,
            original.kind,
            original.id,
            actor.user_id,
        )
        return fork

    async def transition_to_merged(
        self, uow: UnitOfWork, fork: Fork, merged_by: str
    ) -> Fork:
        """Flip a draft fork to merged. Irreversible."""
        if fork.is_merged:
            raise AlreadyMerged("This fork has already been merged.")

        merged_at = datetime.now(UTC)
        applied = await uow.forks.mark_merged(fork.id, merged_by, merged_at)
        if not applied:
            # Lost a race with a concurrent merge of the same fork.
            raise AlreadyMerged("This fork has already been merged.")
        return replace(
            fork,
            state=ForkState.MERGED,
            merged_at=merged_at,
            merged_by=merged_by,
        )

    async def dispose(
        self,
        uow: UnitOfWork,
        fork: Fork,
        policy: DisposalPolicy | None = None,
    ) -> None:
        """Apply the post-merge disposal policy to a fork.

        With DELETE the fork metadata is removed too, so a later merge of the
        same fork fails with InvalidFork rather than AlreadyMerged.
        """
        policy = policy or self._disposal_policy
        if policy is DisposalPolicy.DELETE:
            await uow.properties.delete_by_document(fork.id)
            await uow.taxonomies.delete_by_document(fork.id)
            await uow.forks.delete(fork.id)
            await uow.documents.hard_delete(fork.id)
        else:
            await uow.documents.soft_delete(fork.id)
        logger.info("Disposed fork %s (%s)", fork.id, policy.value)

    async def _copy_properties(self, uow: UnitOfWork, from_id: UUID, to_id: UUID) -> None:
        properties = [
            Property(document_id=to_id, key=p.key, value=p.value)
            for p in await uow.properties.list_by_document(from_id)
            if is_copyable_key(p.key)
        ]
        if properties:
            await uow.properties.create_batch(properties)

    async def _copy_terms(self, uow: UnitOfWork, from_id: UUID, to_id: UUID) -> None:
        for taxonomy in await uow.taxonomies.list_taxonomies(from_id):
            terms = await uow.taxonomies.get_terms(from_id, taxonomy)
            if terms:
                await uow.taxonomies.set_terms(to_id, taxonomy, terms)
