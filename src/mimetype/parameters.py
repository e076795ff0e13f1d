# Copyright (c) The mimetype Authors.
# See LICENSE for details.
"""
The parameter list of a MIME type: an ordered multimap of validated
``key=value`` pairs.

See :rfc:`2045#section-5.1`, :rfc:`7231#section-3.1.1.1` and, for the
``name*=`` form which is carried as an opaque token, :rfc:`5987`.
"""
import re
from operator import attrgetter
from typing import (
    Any,
    Callable,
    Iterable,
    Iterator,
    List,
    Mapping,
    Optional,
    Type,
    TypeVar,
)

import attr
from twisted.logger import Logger

from mimetype._immutable import _Lockable
from mimetype._types import _ForEachCallback, _ParametersInit, _ParameterTuple
from mimetype._validation import (
    _TOKEN_PATTERN,
    ValidationError,
    isValidToken,
    needsQuoting,
    normalizeKey,
    validateValue,
)

_PARAMETER_RE = re.compile(
    r';[ \t]*(?P<key>{token}+)='
    r'(?:"(?P<quoted>(?:[^"\\]|\\"|\\[^"])*?)"|(?P<token>{token}+))'
    r'[ \t]*'.format(token=_TOKEN_PATTERN)
)

_SNIPPET_LENGTH = 30

_P = TypeVar("_P", bound="MIMETypeParameters")


@attr.s(frozen=True, slots=True)
class Parameter:
    """
    One ``key=value`` pair of a :class:`MIMETypeParameters`.

    :ivar key: The parameter name, folded to lowercase.
    :ivar value: The parameter value, verbatim.
    """

    key = attr.ib(converter=normalizeKey)  # type: str
    value = attr.ib(converter=validateValue)  # type: str


def _unquote(quoted: str) -> str:
    return quoted.replace("\\", "")


def _quote(value: str) -> str:
    if not needsQuoting(value):
        return value
    return '"{}"'.format(value.replace("\\", "\\\\").replace('"', '\\"'))


def _parse(text: str) -> List[Parameter]:
    """
    Parse a parameter list such as ``; charset="utf-8"; format=flowed``.

    The leading ``;`` may be omitted.  The whole of ``text`` must be
    consumed, otherwise :class:`ValidationError` is raised quoting the
    beginning of the part that could not be parsed.
    """
    if not text.startswith(";"):
        text = ";" + text

    parameters = []
    position = 0
    while position < len(text):
        match = _PARAMETER_RE.match(text, position)
        if match is None:
            break
        quoted = match.group("quoted")
        if quoted is None:
            value = match.group("token")
        else:
            value = _unquote(quoted)
        parameters.append(Parameter(match.group("key"), value))
        position = match.end()

    if position != len(text):
        rest = text[position:]
        snippet = rest[:_SNIPPET_LENGTH]
        if len(rest) > _SNIPPET_LENGTH:
            snippet += "..."
        raise ValidationError('invalid parameters "{}"'.format(snippet))

    return parameters


def _fromEntries(entries: Iterable[Any]) -> List[Parameter]:
    parameters = []
    for entry in entries:
        if isinstance(entry, (str, bytes)):
            raise ValidationError("invalid parameter entry {!r}".format(entry))
        try:
            key, value = entry
        except (TypeError, ValueError):
            raise ValidationError("invalid parameter entry {!r}".format(entry))
        parameters.append(Parameter(key, value))
    return parameters


class MIMETypeParameters(_Lockable):
    """
    The parameters of a MIME type, in order, duplicates included.

    Keys are tokens and are compared case-insensitively (they are stored in
    lowercase).  Values are any mix of horizontal tabs and printable ASCII,
    possibly empty.

    :param init: One of:

        * ``None`` or ``""`` for an empty list.
        * A string such as ``"; charset=utf-8"``.  The leading ``;`` may be
          omitted.
        * Another :class:`MIMETypeParameters`, which is copied.
        * A mapping of keys to values.
        * An iterable of ``(key, value)`` pairs.

    :raises ValidationError: if ``init`` is malformed or of another type.
    """

    _log = Logger()

    def __init__(self, init: _ParametersInit = None) -> None:
        self._parameters: List[Parameter]
        if init is None or init == "":
            self._parameters = []
        elif isinstance(init, str):
            self._parameters = _parse(init)
        elif isinstance(init, MIMETypeParameters):
            self._parameters = list(init._parameters)
        elif isinstance(init, Mapping):
            self._parameters = _fromEntries(init.items())
        elif isinstance(init, bytes) or not hasattr(init, "__iter__"):
            raise ValidationError(
                "input must be string, mapping, or iterable, not {}".format(
                    type(init).__name__
                )
            )
        else:
            self._parameters = _fromEntries(init)

    @classmethod
    def parse(cls: Type[_P], text: str) -> Optional[_P]:
        """
        Like the constructor, but return ``None`` instead of raising
        :class:`ValidationError`.
        """
        try:
            return cls(text)
        except ValidationError as e:
            cls._log.debug(
                "Rejected MIME type parameters {input!r}: {error}",
                input=text,
                error=str(e),
            )
            return None

    @classmethod
    def canParse(cls, text: str) -> bool:
        return cls.parse(text) is not None

    @classmethod
    def of(cls: Type[_P], init: _ParametersInit) -> _P:
        """
        Return ``init`` if it already is a :class:`MIMETypeParameters`,
        otherwise construct one from it.
        """
        if isinstance(init, cls):
            return init
        return cls(init)

    @property
    def size(self) -> int:
        return len(self._parameters)

    def __len__(self) -> int:
        return len(self._parameters)

    def append(self, key: str, value: str) -> None:
        """
        Add a parameter after all the others, keeping any existing
        parameters with the same key.
        """
        self._assertMutable()
        self._parameters.append(Parameter(key, value))

    def set(self, key: str, value: str) -> None:
        """
        Replace every parameter named ``key`` with a single one, placed
        last.
        """
        self._assertMutable()
        parameter = Parameter(key, value)
        self._parameters = [
            p for p in self._parameters if p.key != parameter.key
        ]
        self._parameters.append(parameter)

    def delete(self, key: str, value: Optional[str] = None) -> int:
        """
        Remove the parameters named ``key`` or, if ``value`` is given, only
        those which also have that value.

        :returns: How many parameters were removed.
        """
        self._assertMutable()
        matches = _matcher(key, value)
        kept = [p for p in self._parameters if not matches(p)]
        removed = len(self._parameters) - len(kept)
        self._parameters = kept
        return removed

    def get(self, key: str) -> Optional[str]:
        """
        Return the value of the first parameter named ``key``, or ``None``.
        """
        key = normalizeKey(key)
        for p in self._parameters:
            if p.key == key:
                return p.value
        return None

    def getAll(self, key: str) -> List[str]:
        key = normalizeKey(key)
        return [p.value for p in self._parameters if p.key == key]

    def has(self, key: str, value: Optional[str] = None) -> bool:
        matches = _matcher(key, value)
        return any(matches(p) for p in self._parameters)

    def __contains__(self, key: object) -> bool:
        return isValidToken(key) and self.has(key)  # type: ignore[arg-type]

    def clear(self) -> None:
        self._assertMutable()
        self._parameters = []

    def sort(self) -> None:
        """
        Order the parameters by key.  Parameters sharing a key keep their
        relative order.
        """
        self._assertMutable()
        self._parameters.sort(key=attrgetter("key"))

    def keys(self) -> Iterator[str]:
        for p in self._parameters:
            yield p.key

    def values(self) -> Iterator[str]:
        for p in self._parameters:
            yield p.value

    def entries(self) -> Iterator[_ParameterTuple]:
        for p in self._parameters:
            yield (p.key, p.value)

    __iter__ = entries

    def forEach(self, callback: _ForEachCallback) -> None:
        """
        Call ``callback(value, key, self)`` for each parameter, in order.
        """
        for key, value in self.entries():
            callback(value, key, self)

    def toString(self, includeLeadingSeparator: bool = False) -> str:
        """
        Serialize the parameters as ``key=value`` pairs separated by
        ``"; "``.  Values that are empty or contain anything but token
        characters are written as quoted-strings.

        :param includeLeadingSeparator: Also put ``"; "`` before the first
            parameter, as is needed after a ``type/subtype``.  Nothing is
            written for an empty list either way.
        """
        output = []
        for key, value in self.entries():
            if output or includeLeadingSeparator:
                output.append("; ")
            output.append("{}={}".format(key, _quote(value)))
        return "".join(output)

    def __str__(self) -> str:
        return self.toString()

    def __repr__(self) -> str:
        return "{}({!r})".format(type(self).__name__, self.toString())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MIMETypeParameters):
            return self._parameters == other._parameters
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]


def _matcher(key: str, value: Optional[str]) -> Callable[[Parameter], bool]:
    """
    Validate a ``key`` and optional ``value`` used as a query, returning a
    predicate selecting the parameters they describe.
    """
    key = normalizeKey(key)
    if value is None:
        return lambda p: p.key == key
    value = validateValue(value)
    return lambda p: p.key == key and p.value == value
