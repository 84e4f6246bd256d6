"""Application service: Define Handler Block use case.

All configuration errors (duplicate handlers, misplaced OTHERS, unknown
names in bindings) are raised by the domain while the block is built,
before anything is persisted.
"""

from __future__ import annotations

import logging

from exdispatch.application.dto import ClauseSpec, HandlerBlockDTO
from exdispatch.application.mapping import block_to_dto
from exdispatch.domain.exceptions import ValidationError
from exdispatch.domain.model.declarations import ExceptionDeclarations
from exdispatch.domain.model.handler import HandlerBlock
from exdispatch.domain.repository.handler_block_repository import (
    HandlerBlockRepository,
)

logger = logging.getLogger(__name__)


class DefineHandlerBlockHandler:

    def __init__(self, block_repo: HandlerBlockRepository) -> None:
        self._block_repo = block_repo

    def handle(
        self,
        name: str,
        clauses: list[ClauseSpec],
        exceptions: list[str] | None = None,
        bindings: dict[str, int] | None = None,
        replace: bool = False,
    ) -> HandlerBlockDTO:
        """Validate and store a new handler block.

        Steps:
        1. Declare the exception names and apply their code bindings.
        2. Build the block (eager duplicate / ordering checks).
        3. Persist, refusing to overwrite unless *replace* is set.
        """
        if not name or not name.strip():
            raise ValidationError("Handler block name is required")

        existing = self._block_repo.get_by_name(name.strip())
        if existing is not None and not replace:
            raise ValidationError(f"Handler block '{name.strip()}' already exists")

        declarations = ExceptionDeclarations.of(exceptions, bindings)
        block = HandlerBlock.build(
            name=name,
            match_sets=[spec.matches for spec in clauses],
            actions=[spec.action for spec in clauses],
            declarations=declarations,
        )
        self._block_repo.save(block)
        logger.info("Handler block '%s' saved with %d clause(s)", block.name, len(block))

        return block_to_dto(block)
