"""Domain service: Exception Dispatcher.

Selects which ``WHEN`` clause of a HandlerBlock fires for a raised
condition:

1. the first clause, in declaration order, whose match set names the
   condition's identifier;
2. otherwise the catch-all clause;
3. otherwise nothing: the result is "unhandled".

Only built HandlerBlocks are accepted, so duplicate handlers and clause
positions have already been checked when the block was constructed.
Dispatch is a pure function of its two inputs and never fails on a
valid block.  A condition known only by its code should be resolved
against the scope's declarations first (see
``ExceptionDeclarations.resolve``); left unresolved, only a catch-all can
catch it.
"""

from __future__ import annotations

import logging

from exdispatch.domain.model.condition import Condition
from exdispatch.domain.model.dispatch_result import DispatchResult
from exdispatch.domain.model.handler import HandlerBlock, HandlerClause

logger = logging.getLogger(__name__)


class ExceptionDispatcher:

    def dispatch(self, condition: Condition, block: HandlerBlock) -> DispatchResult:
        """Return the clause that handles *condition*, or an unhandled result.

        Single pass: stops at the first specific match and remembers the
        catch-all seen on the way.
        """
        if not isinstance(block, HandlerBlock):
            raise TypeError(
                f"dispatch expects a HandlerBlock, got {type(block).__name__}; "
                f"build one with HandlerBlock.build()"
            )

        identifier = condition.identifier
        catch_all: HandlerClause | None = None

        for clause in block.clauses:
            if clause.is_catch_all:
                catch_all = clause
                continue
            if clause.catches(identifier):
                logger.debug(
                    "Condition %s handled in '%s' by clause %d (%s)",
                    condition.label, block.name, clause.position, clause,
                )
                return DispatchResult.matched(condition, clause)

        if catch_all is not None:
            logger.debug(
                "Condition %s handled in '%s' by catch-all at position %d",
                condition.label, block.name, catch_all.position,
            )
            return DispatchResult.matched(condition, catch_all)

        logger.debug("Condition %s unhandled in '%s'", condition.label, block.name)
        return DispatchResult.unhandled(condition)


_default_dispatcher = ExceptionDispatcher()


def dispatch(condition: Condition, block: HandlerBlock) -> DispatchResult:
    """Module-level shortcut for ``ExceptionDispatcher().dispatch``."""
    return _default_dispatcher.dispatch(condition, block)
