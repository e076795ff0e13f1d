# Copyright (c) The mimetype Authors.
# See LICENSE for details.
from typing import (
    TYPE_CHECKING, Any, Callable, Iterable, Mapping, Tuple, Union
)

from typing_extensions import TypeAlias

if TYPE_CHECKING:
    from mimetype.parameters import MIMETypeParameters

_ParameterTuple: TypeAlias = Tuple[str, str]

_ParametersInit: TypeAlias = Union[
    None,
    str,
    "MIMETypeParameters",
    Mapping[str, str],
    Iterable[_ParameterTuple],
]
"""
Values accepted by the :class:`~mimetype.MIMETypeParameters` constructor.
"""

_ForEachCallback: TypeAlias = Callable[[str, str, "MIMETypeParameters"], Any]
"""
Called as ``callback(value, key, parameters)`` for each parameter.
"""
