# Copyright (c) The mimetype Authors.
# See LICENSE for details.
"""
Grammar predicates shared by :class:`~mimetype.MIMEType` and
:class:`~mimetype.MIMETypeParameters`.
"""
import re
from typing import FrozenSet

"""Characters that are valid in a token per RFC 7230 section 3.2.6."""
_TOKEN_CHARS: FrozenSet[str] = frozenset(
    "abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ"  # ALPHA
    "0123456789"  # DIGIT
    "!#$%&'*+-.^_`|~"  # symbols
)

_TOKEN_PATTERN = "[{}]".format(re.escape("".join(sorted(_TOKEN_CHARS))))

_TOKEN_RE = re.compile(_TOKEN_PATTERN + r"+\Z")
_RESTRICTED_TEXT_RE = re.compile(r"[\t\x20-\x7e]*\Z")


class ValidationError(ValueError):
    """
    A MIME type, one of its parts, or one of its parameters is malformed,
    or a locked instance was asked to change.
    """


def isValidToken(s: str) -> bool:
    """
    Is ``s`` a non-empty string of token characters?
    """
    return isinstance(s, str) and _TOKEN_RE.match(s) is not None


def isValidRestrictedText(s: str) -> bool:
    """
    Is every character of ``s`` either a horizontal tab or printable ASCII?

    The empty string is valid restricted text.
    """
    return isinstance(s, str) and _RESTRICTED_TEXT_RE.match(s) is not None


def needsQuoting(s: str) -> bool:
    """
    Must ``s`` be written as a quoted-string to survive a round trip?
    """
    return not isValidToken(s)


def validateToken(s: str, what: str) -> str:
    """
    Return ``s`` unchanged if it is a token, otherwise raise
    :class:`ValidationError` naming ``what`` was invalid.
    """
    if not isValidToken(s):
        raise ValidationError("invalid {} {!r}".format(what, s))
    return s


def normalizeKey(key: str) -> str:
    """
    Validate a parameter key and fold it to lowercase.
    """
    # Validate before lowering: KELVIN SIGN lowers to an ASCII "k".
    return validateToken(key, "parameter key").lower()


def validateValue(value: str) -> str:
    if not isValidRestrictedText(value):
        raise ValidationError("invalid parameter value {!r}".format(value))
    return value
