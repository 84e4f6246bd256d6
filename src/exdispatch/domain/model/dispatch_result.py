"""DispatchResult — the outcome of selecting a handler for a condition.

Derived on every dispatch and never stored.  "Unhandled" is a valid
result, not an error: the caller decides whether to propagate the
condition to an enclosing scope or to terminate.
"""

from __future__ import annotations

from dataclasses import dataclass

from exdispatch.domain.model.condition import Condition
from exdispatch.domain.model.handler import HandlerClause


@dataclass(frozen=True)
class DispatchResult:

    condition: Condition
    clause: HandlerClause | None = None

    @staticmethod
    def matched(condition: Condition, clause: HandlerClause) -> DispatchResult:
        return DispatchResult(condition=condition, clause=clause)

    @staticmethod
    def unhandled(condition: Condition) -> DispatchResult:
        return DispatchResult(condition=condition)

    @property
    def handled(self) -> bool:
        return self.clause is not None

    @property
    def position(self) -> int | None:
        return self.clause.position if self.clause is not None else None

    @property
    def is_catch_all(self) -> bool:
        return self.clause is not None and self.clause.is_catch_all

    def __str__(self) -> str:
        if self.clause is None:
            return f"{self.condition.label}: unhandled"
        return f"{self.condition.label}: {self.clause} (position {self.clause.position})"
