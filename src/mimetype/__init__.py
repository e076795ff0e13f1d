from mimetype._validation import (
    ValidationError,
    isValidRestrictedText,
    isValidToken,
)
from mimetype.mime import MIMEType
from mimetype.parameters import MIMETypeParameters, Parameter

from ._version import __version__ as _version

__version__: str = _version.base()

__all__ = [
    "MIMEType",
    "MIMETypeParameters",
    "Parameter",
    "ValidationError",
    "isValidToken",
    "isValidRestrictedText",
]
