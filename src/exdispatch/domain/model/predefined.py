"""Predefined system exceptions and the codes they are bound to.

Only the commonly handled names are listed; anything else raised by the
system arrives as a code-only condition and must be named by the
enclosing scope before a specific handler can catch it.
"""

from __future__ import annotations

from exdispatch.domain.model.value_objects import normalize_identifier

PREDEFINED_EXCEPTIONS: dict[str, int] = {
    "CASE_NOT_FOUND": -6592,
    "CURSOR_ALREADY_OPEN": -6511,
    "DUP_VAL_ON_INDEX": -1,
    "INVALID_CURSOR": -1001,
    "INVALID_NUMBER": -1722,
    "LOGIN_DENIED": -1017,
    "NO_DATA_FOUND": 100,
    "PROGRAM_ERROR": -6501,
    "ROWTYPE_MISMATCH": -6504,
    "STORAGE_ERROR": -6500,
    "TIMEOUT_ON_RESOURCE": -51,
    "TOO_MANY_ROWS": -1422,
    "VALUE_ERROR": -6502,
    "ZERO_DIVIDE": -1476,
}

_NAMES_BY_CODE: dict[int, str] = {code: name for name, code in PREDEFINED_EXCEPTIONS.items()}

# NO_DATA_FOUND is reported as +100 but its native error number is -1403.
_NAMES_BY_CODE[-1403] = "NO_DATA_FOUND"

PREDEFINED_MESSAGES: dict[str, str] = {
    "CASE_NOT_FOUND": "case not found while executing CASE statement",
    "CURSOR_ALREADY_OPEN": "cursor already open",
    "DUP_VAL_ON_INDEX": "unique constraint violated",
    "INVALID_CURSOR": "invalid cursor",
    "INVALID_NUMBER": "invalid number",
    "LOGIN_DENIED": "invalid username/password; logon denied",
    "NO_DATA_FOUND": "no data found",
    "PROGRAM_ERROR": "internal error",
    "ROWTYPE_MISMATCH": "return types of result set variables or query do not match",
    "STORAGE_ERROR": "out of memory",
    "TIMEOUT_ON_RESOURCE": "timeout occurred while waiting for a resource",
    "TOO_MANY_ROWS": "exact fetch returns more than requested number of rows",
    "VALUE_ERROR": "numeric or value error",
    "ZERO_DIVIDE": "divisor is equal to zero",
}


def is_predefined(name: str) -> bool:
    return normalize_identifier(name) in PREDEFINED_EXCEPTIONS


def code_for(name: str) -> int | None:
    """Return the code bound to a predefined name, or None."""
    return PREDEFINED_EXCEPTIONS.get(normalize_identifier(name))


def name_for(code: int) -> str | None:
    """Return the predefined name bound to *code*, or None."""
    return _NAMES_BY_CODE.get(code)
