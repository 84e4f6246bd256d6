"""Application service: Propagate Condition use case.

Raises a condition in the innermost of several stored blocks and follows
it outwards until a block handles it or it escapes the outermost one.
"""

from __future__ import annotations

from exdispatch.application.dto import ConditionSpec, PropagationDTO
from exdispatch.application.mapping import build_condition, clause_to_dto
from exdispatch.domain.exceptions import EntityNotFoundError, ValidationError
from exdispatch.domain.model.handler import HandlerBlock
from exdispatch.domain.repository.handler_block_repository import (
    HandlerBlockRepository,
)
from exdispatch.domain.service.propagation import PropagationService


class PropagateConditionHandler:

    def __init__(
        self,
        block_repo: HandlerBlockRepository,
        propagation: PropagationService | None = None,
    ) -> None:
        self._block_repo = block_repo
        self._propagation = propagation or PropagationService()

    def handle(self, block_names: list[str], spec: ConditionSpec) -> PropagationDTO:
        """*block_names* runs innermost first."""
        if not block_names:
            raise ValidationError("At least one handler block is required")

        scopes: list[HandlerBlock] = []
        for name in block_names:
            block = self._block_repo.get_by_name(name)
            if block is None:
                raise EntityNotFoundError(f"Handler block '{name}' not found")
            scopes.append(block)

        # The condition is raised in the innermost scope, so its
        # declarations decide whether a name is user-defined.
        condition = build_condition(spec, scopes[0].declarations)
        outcome = self._propagation.propagate(condition, scopes)

        reported = outcome.result.condition if outcome.result is not None else condition
        clause = outcome.result.clause if outcome.handled else None

        return PropagationDTO(
            condition=reported.label,
            sqlcode=reported.sqlcode,
            sqlerrm=reported.sqlerrm,
            handled=outcome.handled,
            trail=list(outcome.trail),
            scope_name=outcome.scope_name,
            depth=outcome.depth,
            clause=clause_to_dto(clause) if clause is not None else None,
        )
