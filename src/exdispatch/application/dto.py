"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ClauseSpec:
    """Input: one WHEN arm as typed by the user (empty = OTHERS)."""

    matches: list[str]
    action: str | None = None


@dataclass(frozen=True)
class ConditionSpec:
    """Input: the condition to raise.

    Give an ``identifier``, a ``code``, or both.  With ``application=True``
    the condition is a user-raised application error and needs
    ``code`` and ``message``.
    """

    identifier: str | None = None
    code: int | None = None
    message: str | None = None
    application: bool = False


@dataclass(frozen=True)
class ClauseDTO:
    """Output: a single WHEN arm as displayed to the user."""

    position: int
    when: str  # e.g. "WHEN NO_DATA_FOUND OR TOO_MANY_ROWS"
    action: str | None
    catch_all: bool


@dataclass(frozen=True)
class HandlerBlockDTO:
    """Output: a complete handler block."""

    name: str
    clauses: list[ClauseDTO]
    has_catch_all: bool = False
    exceptions: list[str] = field(default_factory=list)
    bindings: dict[str, int] = field(default_factory=dict)


@dataclass(frozen=True)
class DispatchDTO:
    """Output: which clause (if any) handled a condition."""

    block_name: str
    condition: str  # identifier or formatted code
    sqlcode: int
    sqlerrm: str
    handled: bool
    clause: ClauseDTO | None


@dataclass(frozen=True)
class PropagationDTO:
    """Output: the result of offering a condition to a chain of blocks."""

    condition: str
    sqlcode: int
    sqlerrm: str
    handled: bool
    trail: list[str]
    scope_name: str | None = None
    depth: int | None = None
    clause: ClauseDTO | None = None
