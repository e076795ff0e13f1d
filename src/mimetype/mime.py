# Copyright (c) The mimetype Authors.
# See LICENSE for details.
from typing import Optional, Tuple, Type, TypeVar, Union

from twisted.logger import Logger

from mimetype._immutable import _Lockable
from mimetype._validation import ValidationError, validateToken
from mimetype.parameters import MIMETypeParameters

_M = TypeVar("_M", bound="MIMEType")


def _splitTypeAndSubtype(typeAndSubtype: str) -> Tuple[str, str]:
    type_, slash, subtype = typeAndSubtype.partition("/")
    if not slash:
        raise ValidationError(
            "invalid MIME type {!r}: missing subtype".format(typeAndSubtype)
        )
    return validateToken(type_, "type"), validateToken(subtype, "subtype")


class MIMEType(_Lockable):
    """
    A MIME type such as ``text/html; charset=utf-8``, as found in a
    ``Content-Type`` header.

    The type and subtype are kept as given; the parameters are a
    :class:`~mimetype.MIMETypeParameters` owned by this instance and locked
    along with it.

    :param text: The MIME type string.  Everything from the first ``;`` on
        is parsed as parameters.

    :raises ValidationError: if ``text`` is not a valid MIME type.
    """

    _log = Logger()

    def __init__(self, text: str) -> None:
        if not isinstance(text, str):
            raise ValidationError(
                "input must be string, not {}".format(type(text).__name__)
            )
        head, semicolon, tail = text.partition(";")
        self._type, self._subtype = _splitTypeAndSubtype(head)
        self._parameters = MIMETypeParameters(semicolon + tail)

    @classmethod
    def parse(cls: Type[_M], text: str) -> Optional[_M]:
        """
        Like the constructor, but return ``None`` instead of raising
        :class:`ValidationError`.
        """
        try:
            return cls(text)
        except ValidationError as e:
            cls._log.debug(
                "Rejected MIME type {input!r}: {error}",
                input=text,
                error=str(e),
            )
            return None

    @classmethod
    def canParse(cls, text: str) -> bool:
        return cls.parse(text) is not None

    @classmethod
    def of(cls: Type[_M], value: Union[str, _M]) -> _M:
        """
        Return ``value`` if it already is a :class:`MIMEType`, otherwise
        parse it.
        """
        if isinstance(value, cls):
            return value
        return cls(value)  # type: ignore[arg-type]

    @property
    def type(self) -> str:
        return self._type

    @type.setter
    def type(self, value: str) -> None:
        self._assertMutable()
        self._type = validateToken(value, "type")

    @property
    def subtype(self) -> str:
        return self._subtype

    @subtype.setter
    def subtype(self, value: str) -> None:
        self._assertMutable()
        self._subtype = validateToken(value, "subtype")

    @property
    def typeAndSubtype(self) -> str:
        """
        The ``type/subtype`` part, without parameters.  Assigning to it
        replaces both halves, or neither if the new value is invalid.
        """
        return "{}/{}".format(self._type, self._subtype)

    @typeAndSubtype.setter
    def typeAndSubtype(self, value: str) -> None:
        self._assertMutable()
        self._type, self._subtype = _splitTypeAndSubtype(value)

    @property
    def parameters(self) -> MIMETypeParameters:
        return self._parameters

    def makeImmutable(self: _M) -> _M:
        """
        Lock this MIME type and its parameters.
        """
        self._parameters.makeImmutable()
        return super().makeImmutable()

    def toString(self) -> str:
        return self.typeAndSubtype + self._parameters.toString(
            includeLeadingSeparator=True
        )

    def __str__(self) -> str:
        return self.toString()

    def __repr__(self) -> str:
        return "{}({!r})".format(type(self).__name__, self.toString())

    def __eq__(self, other: object) -> bool:
        if isinstance(other, MIMEType):
            return (
                self.typeAndSubtype.lower() == other.typeAndSubtype.lower()
                and self._parameters == other._parameters
            )
        return NotImplemented

    __hash__ = None  # type: ignore[assignment]
