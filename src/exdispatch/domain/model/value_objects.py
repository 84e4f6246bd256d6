"""Value rules shared across the domain.

Identifiers and error codes are plain ``str``/``int`` values on the model
objects; these helpers hold the validation so that an invalid identifier
or an out-of-range application error code can never reach a Condition.
"""

from __future__ import annotations

import re

from exdispatch.domain.exceptions import InvalidErrorCode, ValidationError

# ---------------------------------------------------------------------------
# Constants for user-raised application errors
# ---------------------------------------------------------------------------
APPLICATION_ERROR_MIN = -20999
APPLICATION_ERROR_MAX = -20000

CATCH_ALL = "OTHERS"

_IDENTIFIER_RE = re.compile(r"^[A-Z][A-Z0-9_$#]*$")
_MAX_IDENTIFIER_LENGTH = 128


def normalize_identifier(raw: str) -> str:
    """Return *raw* as a canonical (upper-case, stripped) exception name.

    Exception names are case-insensitive, so ``no_data_found`` and
    ``NO_DATA_FOUND`` denote the same condition.
    """
    if not isinstance(raw, str):
        raise ValidationError(
            f"Exception name must be a string, got {type(raw).__name__}"
        )
    name = raw.strip().upper()
    if not name:
        raise ValidationError("Exception name cannot be blank")
    if len(name) > _MAX_IDENTIFIER_LENGTH:
        raise ValidationError(
            f"Exception name exceeds {_MAX_IDENTIFIER_LENGTH} characters: {name[:20]}..."
        )
    if not _IDENTIFIER_RE.match(name):
        raise ValidationError(f"Invalid exception name: {raw!r}")
    return name


def check_error_code(code: int) -> int:
    """Reject anything that is not a plain integer."""
    if isinstance(code, bool) or not isinstance(code, int):
        raise ValidationError(
            f"Error code must be an integer, got {type(code).__name__}"
        )
    return code


def check_application_code(code: int) -> int:
    """Ensure *code* lies in the range reserved for application errors."""
    check_error_code(code)
    if not APPLICATION_ERROR_MIN <= code <= APPLICATION_ERROR_MAX:
        raise InvalidErrorCode(code, APPLICATION_ERROR_MIN, APPLICATION_ERROR_MAX)
    return code


def format_error_number(code: int) -> str:
    """Format a code the way error stacks print it, e.g. ``ORA-01422``."""
    return f"ORA-{abs(code):05d}"
