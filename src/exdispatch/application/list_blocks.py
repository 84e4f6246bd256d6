"""Application service: List Handler Blocks use case (query)."""

from __future__ import annotations

from exdispatch.application.dto import HandlerBlockDTO
from exdispatch.application.mapping import block_to_dto
from exdispatch.domain.repository.handler_block_repository import (
    HandlerBlockRepository,
)


class ListHandlerBlocksHandler:

    def __init__(self, block_repo: HandlerBlockRepository) -> None:
        self._block_repo = block_repo

    def handle(self) -> list[HandlerBlockDTO]:
        blocks = sorted(self._block_repo.list_all(), key=lambda b: b.name.lower())
        return [block_to_dto(block) for block in blocks]
