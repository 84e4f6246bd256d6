"""Handler clauses and the HandlerBlock that orders them.

A HandlerBlock is the ``EXCEPTION`` section of one block: an ordered list
of ``WHEN`` arms.  All configuration checks happen here, when the block is
built, so that dispatch itself never has to fail.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from exdispatch.domain.exceptions import DuplicateHandler, ValidationError
from exdispatch.domain.model.declarations import ExceptionDeclarations
from exdispatch.domain.model.value_objects import CATCH_ALL, normalize_identifier


@dataclass(frozen=True)
class HandlerClause:
    """One ``WHEN`` arm.

    An empty ``matches`` set is the catch-all (``WHEN OTHERS``).  Passing
    ``{"OTHERS"}`` is accepted and normalised to the empty set.
    """

    matches: frozenset[str]
    position: int
    action: str | None = None

    def __post_init__(self) -> None:
        if isinstance(self.matches, str):
            raise ValidationError(
                "Clause matches must be a collection of names, not a single string"
            )
        names = frozenset(normalize_identifier(m) for m in self.matches)
        if CATCH_ALL in names:
            if len(names) > 1:
                raise ValidationError(f"'{CATCH_ALL}' cannot be combined with other names")
            names = frozenset()
        object.__setattr__(self, "matches", names)

        if isinstance(self.position, bool) or not isinstance(self.position, int):
            raise ValidationError("Clause position must be an integer")
        if self.position < 0:
            raise ValidationError("Clause position cannot be negative")

    @property
    def is_catch_all(self) -> bool:
        return not self.matches

    def catches(self, identifier: str | None) -> bool:
        """True if this clause names *identifier* explicitly."""
        return identifier is not None and identifier in self.matches

    def __str__(self) -> str:
        if self.is_catch_all:
            return f"WHEN {CATCH_ALL}"
        return "WHEN " + " OR ".join(sorted(self.matches))


@dataclass(frozen=True)
class HandlerBlock:
    """Aggregate root: a named, validated, ordered sequence of clauses.

    Use ``HandlerBlock.build()`` to create one from plain match sets.

    Invariants:
    - at least one clause
    - clause positions equal their index in ``clauses``
    - no identifier is matched by two clauses
    - at most one catch-all, and it is the last clause
    """

    name: str
    clauses: tuple[HandlerClause, ...]
    declarations: ExceptionDeclarations = field(default_factory=ExceptionDeclarations)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Handler block name is required")
        object.__setattr__(self, "name", self.name.strip())
        object.__setattr__(self, "clauses", tuple(self.clauses))

        if not self.clauses:
            raise ValidationError("A handler block needs at least one WHEN clause")

        seen: dict[str, int] = {}
        catch_all_at: int | None = None

        for index, clause in enumerate(self.clauses):
            if clause.position != index:
                raise ValidationError(
                    f"Clause at index {index} declares position {clause.position}"
                )
            if clause.is_catch_all:
                if catch_all_at is not None:
                    raise DuplicateHandler(
                        {CATCH_ALL},
                        f"'{CATCH_ALL}' handler declared at positions "
                        f"{catch_all_at} and {index}",
                    )
                catch_all_at = index
                continue

            overlap = {name for name in clause.matches if name in seen}
            if overlap:
                first = min(seen[name] for name in overlap)
                raise DuplicateHandler(
                    overlap,
                    f"{', '.join(sorted(overlap))} handled by clauses at positions "
                    f"{first} and {index}",
                )
            for name in clause.matches:
                seen[name] = index

        if catch_all_at is not None and catch_all_at != len(self.clauses) - 1:
            raise ValidationError(f"'{CATCH_ALL}' handler must be the last clause")

    # --- Factory --------------------------------------------------------------

    @staticmethod
    def build(
        name: str,
        match_sets: Iterable[Iterable[str]],
        actions: Iterable[str | None] | None = None,
        declarations: ExceptionDeclarations | None = None,
    ) -> HandlerBlock:
        """Build a block from match sets given in declaration order."""
        match_sets = list(match_sets)
        action_list = list(actions) if actions is not None else [None] * len(match_sets)
        if len(action_list) != len(match_sets):
            raise ValidationError("Number of actions must equal number of clauses")

        clauses = tuple(
            HandlerClause(
                # a bare string names a single exception
                matches=frozenset([matches] if isinstance(matches, str) else matches),
                position=i,
                action=action,
            )
            for i, (matches, action) in enumerate(zip(match_sets, action_list))
        )
        return HandlerBlock(
            name=name,
            clauses=clauses,
            declarations=declarations or ExceptionDeclarations(),
        )

    # --- Sequence protocol ----------------------------------------------------

    def __iter__(self) -> Iterator[HandlerClause]:
        return iter(self.clauses)

    def __len__(self) -> int:
        return len(self.clauses)

    def __getitem__(self, position: int) -> HandlerClause:
        return self.clauses[position]

    # --- Computed properties --------------------------------------------------

    @property
    def catch_all(self) -> HandlerClause | None:
        last = self.clauses[-1]
        return last if last.is_catch_all else None
