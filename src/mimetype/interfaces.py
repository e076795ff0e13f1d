"""
Interfaces.
"""

from zope.interface import Attribute, Interface


class IImmutable(Interface):
    """
    An object which may be mutated until it is locked, and never again
    afterwards.
    """
    immutable = Attribute(
        "C{True} once L{makeImmutable} has been called, C{False} before.")

    def makeImmutable():
        """
        Lock the object.  Every later mutation raises
        L{mimetype.ValidationError}.  Locking twice is harmless.

        :return: the object itself.
        """
