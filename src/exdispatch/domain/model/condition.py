"""Condition — a raised error instance.

A condition is identified by a symbolic name, a numeric code, or both.
It is an immutable value: "catching" it never mutates it, and whichever
collaborator needs the current condition receives it explicitly.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from enum import Enum

from exdispatch.domain.exceptions import ValidationError
from exdispatch.domain.model import predefined
from exdispatch.domain.model.value_objects import (
    check_application_code,
    check_error_code,
    format_error_number,
    normalize_identifier,
)

USER_DEFINED_SQLCODE = 1
USER_DEFINED_SQLERRM = "User-Defined Exception"
NO_DATA_FOUND_SQLCODE = 100


class ConditionKind(Enum):
    SYSTEM = "SYSTEM"
    USER_DEFINED = "USER_DEFINED"
    APPLICATION = "APPLICATION"


@dataclass(frozen=True)
class Condition:
    """Value object for a raised condition.

    Invariants:
    - at least one of ``identifier`` / ``code`` is set
    - an APPLICATION condition carries a code in [-20999, -20000]
      and a non-blank message

    Prefer the factories (``system``, ``named``, ``from_code``,
    ``application_error``) over calling the constructor directly.
    """

    identifier: str | None = None
    code: int | None = None
    message: str = ""
    kind: ConditionKind = ConditionKind.SYSTEM

    def __post_init__(self) -> None:
        if self.identifier is not None:
            object.__setattr__(self, "identifier", normalize_identifier(self.identifier))
        if self.code is not None:
            check_error_code(self.code)
        if not isinstance(self.message, str):
            raise ValidationError("Condition message must be a string")

        if self.kind == ConditionKind.APPLICATION:
            if self.code is None:
                raise ValidationError("Application errors require an error code")
            check_application_code(self.code)
            if not self.message.strip():
                raise ValidationError("Application errors require a message")
        elif self.identifier is None and self.code is None:
            raise ValidationError("A condition needs an exception name or an error code")

    # --- Factories ------------------------------------------------------------

    @staticmethod
    def system(identifier: str, message: str | None = None) -> Condition:
        """A predefined system exception, e.g. ``NO_DATA_FOUND``."""
        name = normalize_identifier(identifier)
        code = predefined.code_for(name)
        if code is None:
            raise ValidationError(f"'{name}' is not a predefined exception")
        if message is None:
            message = predefined.PREDEFINED_MESSAGES.get(name, "")
        return Condition(identifier=name, code=code, message=message)

    @staticmethod
    def named(identifier: str, message: str = "") -> Condition:
        """A user-declared exception raised by name."""
        return Condition(
            identifier=identifier,
            message=message,
            kind=ConditionKind.USER_DEFINED,
        )

    @staticmethod
    def from_code(code: int, message: str = "") -> Condition:
        """An unnamed condition known only by its code."""
        return Condition(code=code, message=message)

    @staticmethod
    def application_error(code: int, message: str) -> Condition:
        """A user-raised application error (code in [-20999, -20000])."""
        return Condition(code=code, message=message, kind=ConditionKind.APPLICATION)

    # --- Derived values -------------------------------------------------------

    def with_identifier(self, identifier: str) -> Condition:
        return replace(self, identifier=identifier)

    def with_code(self, code: int) -> Condition:
        return replace(self, code=code)

    @property
    def sqlcode(self) -> int:
        if self.code is None:
            return USER_DEFINED_SQLCODE
        if self.identifier == "NO_DATA_FOUND" or self.code in (NO_DATA_FOUND_SQLCODE, -1403):
            return NO_DATA_FOUND_SQLCODE
        return self.code

    @property
    def sqlerrm(self) -> str:
        if self.code is None:
            return USER_DEFINED_SQLERRM
        if self.sqlcode == NO_DATA_FOUND_SQLCODE:
            return f"{format_error_number(-1403)}: {self.message or 'no data found'}"
        return f"{format_error_number(self.code)}: {self.message}".rstrip()

    @property
    def label(self) -> str:
        """Short display name: the identifier, or the formatted code."""
        if self.identifier is not None:
            return self.identifier
        return format_error_number(self.code)  # type: ignore[arg-type]

    def __str__(self) -> str:
        return self.sqlerrm if self.identifier is None else f"{self.identifier} ({self.sqlerrm})"
