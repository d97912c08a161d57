"""Create fork use case."""

from uuid import UUID

from docfork.application.dto.fork_dto import ForkOutput
from docfork.application.services.fork_manager import ForkManager
from docfork.domain.value_objects import Actor


class CreateForkUseCase:
    """Create a working copy of a document."""

    def __init__(self, unit_of_work_factory: type, fork_manager: ForkManager) -> None:
        self._uow_factory = unit_of_work_factory
        self._fork_manager = fork_manager

    async def execute(self, actor: Actor, original_id: UUID) -> ForkOutput:
        """Fork the document. Raises NotFound if it does not exist."""
        async with self._uow_factory() as uow:
            fork = await self._fork_manager.create_fork(uow, original_id, actor)
            document = await uow.documents.get_by_id(fork.id)
            return ForkOutput.of(fork, document)
