"""Record identifiers: 24-character hexadecimal tokens.

Identifiers are assigned by the stores when a document is first written and
are checked with :func:`is_valid_identifier` before any lookup is attempted,
so malformed path parameters never reach the database.
"""

import re
import secrets
import time

IDENTIFIER_LENGTH = 24

_IDENTIFIER_RE = re.compile(r"[0-9a-fA-F]{24}")


def is_valid_identifier(value) -> bool:
    """Return True if ``value`` has the shape of a store identifier."""

    if not isinstance(value, str):
        return False
    return _IDENTIFIER_RE.fullmatch(value) is not None


def new_identifier() -> str:
    """Generate a fresh identifier: 4 bytes of epoch seconds + 8 random bytes."""

    return f"{int(time.time()) & 0xFFFFFFFF:08x}{secrets.token_hex(8)}"


__all__ = ["IDENTIFIER_LENGTH", "is_valid_identifier", "new_identifier"]
