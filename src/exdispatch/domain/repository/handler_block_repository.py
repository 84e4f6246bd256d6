"""Abstract repository for the HandlerBlock aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from exdispatch.domain.model.handler import HandlerBlock


class HandlerBlockRepository(ABC):

    @abstractmethod
    def get_by_name(self, name: str) -> HandlerBlock | None:
        """Return a block by its name, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[HandlerBlock]:
        """Return every stored block."""

    @abstractmethod
    def save(self, block: HandlerBlock) -> None:
        """Persist a new or updated block."""
