"""Application service: Show Handler Block use case (query)."""

from __future__ import annotations

from exdispatch.application.dto import HandlerBlockDTO
from exdispatch.application.mapping import block_to_dto
from exdispatch.domain.exceptions import EntityNotFoundError
from exdispatch.domain.repository.handler_block_repository import (
    HandlerBlockRepository,
)


class ShowHandlerBlockHandler:

    def __init__(self, block_repo: HandlerBlockRepository) -> None:
        self._block_repo = block_repo

    def handle(self, name: str) -> HandlerBlockDTO:
        block = self._block_repo.get_by_name(name)
        if block is None:
            raise EntityNotFoundError(f"Handler block '{name}' not found")
        return block_to_dto(block)
