"""Domain service: Propagation.

Acts on an "unhandled" dispatch result the way nested blocks do: the
condition is offered to each enclosing scope in turn, innermost first,
until one handles it.  If none does, the condition escapes to the host
environment and the outcome is *terminated*.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass

from exdispatch.domain.model.condition import Condition
from exdispatch.domain.model.dispatch_result import DispatchResult
from exdispatch.domain.model.handler import HandlerBlock
from exdispatch.domain.service.exception_dispatcher import ExceptionDispatcher

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PropagationOutcome:
    """Where a condition ended up after walking the scope chain.

    ``trail`` lists every scope the condition was offered to, in order,
    including the one that handled it.
    """

    condition: Condition
    result: DispatchResult | None
    scope_name: str | None
    depth: int | None
    trail: tuple[str, ...]

    @property
    def handled(self) -> bool:
        return self.result is not None and self.result.handled

    @property
    def terminated(self) -> bool:
        return not self.handled


class PropagationService:

    def __init__(self, dispatcher: ExceptionDispatcher | None = None) -> None:
        self._dispatcher = dispatcher or ExceptionDispatcher()

    def propagate(
        self,
        condition: Condition,
        scopes: Sequence[HandlerBlock],
    ) -> PropagationOutcome:
        """Offer *condition* to each scope, innermost first.

        Each scope resolves the condition against its own declarations
        before dispatching, so a code bound to a name in an outer scope is
        caught by name there even if the inner scope did not know it.
        """
        trail: list[str] = []
        last: DispatchResult | None = None

        for depth, scope in enumerate(scopes):
            trail.append(scope.name)
            resolved = scope.declarations.resolve(condition)
            last = self._dispatcher.dispatch(resolved, scope)
            if last.handled:
                logger.debug(
                    "Condition %s handled in scope '%s' at depth %d",
                    resolved.label, scope.name, depth,
                )
                return PropagationOutcome(
                    condition=condition,
                    result=last,
                    scope_name=scope.name,
                    depth=depth,
                    trail=tuple(trail),
                )

        logger.info(
            "Condition %s not handled by any of %d scope(s); terminating",
            condition.label, len(trail),
        )
        return PropagationOutcome(
            condition=condition,
            result=last,
            scope_name=None,
            depth=None,
            trail=tuple(trail),
        )
