# Copyright (c) The mimetype Authors.
# See LICENSE for details.
from typing import TypeVar

from zope.interface import implementer

from mimetype._validation import ValidationError
from mimetype.interfaces import IImmutable

_Self = TypeVar("_Self", bound="_Lockable")


@implementer(IImmutable)
class _Lockable:
    """
    Mixin carrying the one-way immutability flag.

    :ivar _immutable: Whether :meth:`makeImmutable` has been called.
    """

    _immutable: bool = False

    @property
    def immutable(self) -> bool:
        return self._immutable

    def makeImmutable(self: _Self) -> _Self:
        self._immutable = True
        return self

    def _assertMutable(self) -> None:
        if self._immutable:
            raise ValidationError("immutable {}".format(type(self).__name__))
