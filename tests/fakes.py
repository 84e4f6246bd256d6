"""In-memory fake repository for testing.

Implements the same abstract interface as the JSON repository but keeps
everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from exdispatch.domain.model.handler import HandlerBlock
from exdispatch.domain.repository.handler_block_repository import (
    HandlerBlockRepository,
)


class FakeHandlerBlockRepository(HandlerBlockRepository):

    def __init__(self, blocks: list[HandlerBlock] | None = None) -> None:
        self._store: dict[str, HandlerBlock] = {}
        for block in blocks or []:
            self._store[block.name.lower()] = block

    def get_by_name(self, name: str) -> HandlerBlock | None:
        return self._store.get(name.strip().lower())

    def list_all(self) -> list[HandlerBlock]:
        return list(self._store.values())

    def save(self, block: HandlerBlock) -> None:
        self._store[block.name.lower()] = block
