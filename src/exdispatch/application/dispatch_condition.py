"""Application service: Dispatch Condition use case.

Raises a condition inside one stored handler block and reports which
clause (if any) catches it.
"""

from __future__ import annotations

from exdispatch.application.dto import ConditionSpec, DispatchDTO
from exdispatch.application.mapping import build_condition, clause_to_dto
from exdispatch.domain.exceptions import EntityNotFoundError
from exdispatch.domain.repository.handler_block_repository import (
    HandlerBlockRepository,
)
from exdispatch.domain.service.exception_dispatcher import ExceptionDispatcher


class DispatchConditionHandler:

    def __init__(
        self,
        block_repo: HandlerBlockRepository,
        dispatcher: ExceptionDispatcher | None = None,
    ) -> None:
        self._block_repo = block_repo
        self._dispatcher = dispatcher or ExceptionDispatcher()

    def handle(self, block_name: str, spec: ConditionSpec) -> DispatchDTO:
        """Dispatch a condition against the named block.

        Steps:
        1. Load the block (fail if not found).
        2. Build the condition and resolve it against the block's
           declarations (names <-> codes).
        3. Dispatch and map the result.
        """
        block = self._block_repo.get_by_name(block_name)
        if block is None:
            raise EntityNotFoundError(f"Handler block '{block_name}' not found")

        condition = build_condition(spec, block.declarations)
        condition = block.declarations.resolve(condition)
        result = self._dispatcher.dispatch(condition, block)

        return DispatchDTO(
            block_name=block.name,
            condition=condition.label,
            sqlcode=condition.sqlcode,
            sqlerrm=condition.sqlerrm,
            handled=result.handled,
            clause=clause_to_dto(result.clause) if result.clause is not None else None,
        )
