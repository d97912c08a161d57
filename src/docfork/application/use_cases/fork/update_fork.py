"""Update fork use case - edit a draft fork's mergeable fields."""

import logging
from datetime import UTC, datetime
from uuid import UUID

from docfork.application.dto.fork_dto import ForkOutput, ForkUpdateInput
from docfork.domain.exceptions import ForkLocked, NotFound, ValidationError
from docfork.domain.value_objects import Actor

logger = logging.getLogger(__name__)


class UpdateForkUseCase:
    """Edit a fork. Merged and locked forks are read-only."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self, actor: Actor, fork_id: UUID, input_data: ForkUpdateInput
    ) -> ForkOutput:
        changes = input_data.changes()
        if not changes:
            raise ValidationError("No fields to update")

        async with self._uow_factory() as uow:
            fork = await uow.forks.get_by_id(fork_id)
            document = (
                await uow.documents.get_by_id(fork_id, include_deleted=True) if fork else None
            )
            if not fork or not document:
                raise NotFound("Fork", str(fork_id))
            if fork.is_merged or document.deleted_at:
                logger.warning("Refused edit of locked fork %s by %s", fork_id, actor.user_id)
                raise ForkLocked("This fork has been merged and can no longer be edited.")

            now = datetime.now(UTC)
            await uow.documents.update_fields(fork_id, changes, now)
            document = await uow.documents.get_by_id(fork_id)
            return ForkOutput.of(fork, document)
