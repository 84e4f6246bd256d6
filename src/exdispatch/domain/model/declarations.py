"""ExceptionDeclarations — the names a scope declares and the codes bound to them.

Models ``PRAGMA EXCEPTION_INIT``: a scope first declares an exception name,
then may associate it with a numeric code so that a system error raised
only by code can be caught by name.
"""

from __future__ import annotations

from dataclasses import dataclass

from exdispatch.domain.exceptions import ValidationError
from exdispatch.domain.model import predefined
from exdispatch.domain.model.condition import Condition
from exdispatch.domain.model.value_objects import (
    CATCH_ALL,
    check_error_code,
    normalize_identifier,
)


@dataclass(frozen=True)
class ExceptionDeclarations:
    """Immutable set of declared names plus name -> code bindings.

    ``declare`` and ``bind`` return new instances.

    Invariants:
    - only declared names can be bound
    - a name is bound at most once, and a code to at most one name
    """

    names: frozenset[str] = frozenset()
    bindings: tuple[tuple[str, int], ...] = ()

    # --- Builders -------------------------------------------------------------

    def declare(self, name: str) -> ExceptionDeclarations:
        name = normalize_identifier(name)
        if name == CATCH_ALL:
            raise ValidationError(f"'{CATCH_ALL}' cannot be declared as an exception")
        if name in self.names:
            raise ValidationError(f"Exception '{name}' is already declared")
        return ExceptionDeclarations(self.names | {name}, self.bindings)

    def bind(self, name: str, code: int) -> ExceptionDeclarations:
        """Associate a declared name with an error code."""
        name = normalize_identifier(name)
        check_error_code(code)

        if name not in self.names:
            raise ValidationError(
                f"Exception '{name}' must be declared before it can be bound to a code"
            )
        if code != 100 and (code >= 0 or code == -1403):
            raise ValidationError(
                f"Cannot bind '{name}' to {code}: code must be negative (or 100), "
                f"and not -1403"
            )
        existing = self.code_of(name)
        if existing is not None:
            raise ValidationError(f"Exception '{name}' is already bound to {existing}")
        owner = self._user_name_of(code)
        if owner is not None:
            raise ValidationError(f"Code {code} is already bound to '{owner}'")

        return ExceptionDeclarations(self.names, self.bindings + ((name, code),))

    @staticmethod
    def of(names: list[str] | None = None, bindings: dict[str, int] | None = None) -> ExceptionDeclarations:
        """Convenience factory: declare every name, then apply every binding."""
        decls = ExceptionDeclarations()
        for name in names or []:
            decls = decls.declare(name)
        for name, code in (bindings or {}).items():
            decls = decls.bind(name, code)
        return decls

    # --- Lookups --------------------------------------------------------------

    def is_declared(self, name: str) -> bool:
        return normalize_identifier(name) in self.names

    def code_of(self, name: str) -> int | None:
        name = normalize_identifier(name)
        for bound_name, code in self.bindings:
            if bound_name == name:
                return code
        return None

    def name_of(self, code: int) -> str | None:
        """Return the name bound to *code*, preferring this scope's own bindings."""
        return self._user_name_of(code) or predefined.name_for(code)

    def as_dict(self) -> dict[str, int]:
        return dict(self.bindings)

    # --- Resolution -----------------------------------------------------------

    def resolve(self, condition: Condition) -> Condition:
        """Fill in whatever half of (identifier, code) this scope can supply.

        A code-only condition gains the name bound to its code; a declared
        name raised without a code gains its bound code.  Anything else is
        returned unchanged.
        """
        if condition.identifier is None and condition.code is not None:
            name = self.name_of(condition.code)
            if name is not None:
                return condition.with_identifier(name)
        elif condition.identifier is not None and condition.code is None:
            if condition.identifier in self.names:
                code = self.code_of(condition.identifier)
                if code is not None:
                    return condition.with_code(code)
        return condition

    # --- Internal helpers -----------------------------------------------------

    def _user_name_of(self, code: int) -> str | None:
        for name, bound_code in self.bindings:
            if bound_code == code:
                return name
        return None
