"""Get and list fork use cases."""

from uuid import UUID

from docfork.application.dto.fork_dto import ForkOutput
from docfork.domain.exceptions import NotFound
from docfork.domain.value_objects import ForkState


class GetForkUseCase:
    """Get fork by id, including locked forks."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(self, fork_id: UUID) -> ForkOutput:
        async with self._uow_factory() as uow:
            fork = await uow.forks.get_by_id(fork_id)
            document = (
                await uow.documents.get_by_id(fork_id, include_deleted=True) if fork else None
            )
            if not fork or not document:
                raise NotFound("Fork", str(fork_id))
            return ForkOutput.of(fork, document)


class ListForksUseCase:
    """List forks, optionally of one original and in one state."""

    def __init__(self, unit_of_work_factory: type) -> None:
        self._uow_factory = unit_of_work_factory

    async def execute(
        self,
        *,
        original_id: UUID | None = None,
        state: ForkState | None = None,
        cursor: str | None = None,
        limit: int = 20,
    ) -> tuple[list[ForkOutput], str | None]:
        async with self._uow_factory() as uow:
            forks, next_cursor = await uow.forks.list(
                original_id=original_id,
                state=state,
                cursor=cursor,
                limit=limit,
            )
            items: list[ForkOutput] = []
            for fork in forks:
                document = await uow.documents.get_by_id(fork.id, include_deleted=True)
                if document:
                    items.append(ForkOutput.of(fork, document))
        return items, next_cursor
