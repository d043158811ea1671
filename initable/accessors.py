"""Read-only accessors for introduced fields.

Each field gets a data descriptor on the class, so it takes precedence
over the value stored in the instance namespace. Visibility is enforced
by finding the method the access comes from: the innermost calling frame
whose code object is a method defined on the receiver's class. Lambdas,
closures and generator expressions count as the method that defines and
calls them.

    public      anyone may read
    protected   called from a method whose receiver is an instance of the
                defining class
    private     called from a method whose receiver is the instance itself

Denied reads raise AccessError, an AttributeError, so ``hasattr`` reports
the field as absent from outside. Only the instance's own methods may
assign or delete through a reader.
"""

from __future__ import annotations

import inspect
import logging
import sys
from enum import Enum
from functools import cached_property
from typing import Any, Iterable

logger = logging.getLogger(__name__)

class AccessError(AttributeError):
    """Raised when a protected or private field is read from outside."""


class Visibility(str, Enum):
    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"

    @classmethod
    def resolve(cls, token: Any) -> Visibility:
        """Map a visibility request to a member; unknown tokens become PRIVATE."""
        try:
            return cls(token)
        except ValueError:
            logger.debug("unknown visibility %r, falling back to private", token)
            return cls.PRIVATE


DEFAULT_VISIBILITY = Visibility.PRIVATE


def _functions(value):
    # staticmethods and classmethods never run with an instance receiver.
    if isinstance(value, property):
        return tuple(fn for fn in (value.fget, value.fset, value.fdel) if fn is not None)
    if isinstance(value, cached_property):
        return (value.func,)
    if inspect.isfunction(value):
        return (value,)
    return ()


def method_codes(cls: type) -> set:
    """Code objects of the instance methods defined along cls's MRO."""
    codes = set()
    for klass in cls.__mro__:
        for value in vars(klass).values():
            for fn in _functions(value):
                code = getattr(inspect.unwrap(fn), "__code__", None)
                if code is not None:
                    codes.add(code)
    return codes


def _encloses(outer, inner) -> bool:
    for const in outer.co_consts:
        if inspect.iscode(const) and (const is inner or _encloses(const, inner)):
            return True
    return False


def _receiver(frame) -> Any:
    """Receiver of the method the frame belongs to, or None outside methods."""
    while frame is not None:
        code = frame.f_code
        if code.co_argcount:
            candidate = frame.f_locals.get(code.co_varnames[0])
            if candidate is not None and code in method_codes(type(candidate)):
                return candidate
        # Lambdas, closures and generator expressions run for the code that
        # defines them.
        parent = frame.f_back
        if parent is None or not _encloses(parent.f_code, code):
            return None
        frame = parent
    return None


class Reader:
    """Read-only field accessor installed on a class."""

    def __init__(self, name: str, owner: type, visibility: Visibility):
        self.name = name
        self.owner = owner
        self.visibility = visibility

    def __repr__(self):
        return f"<{self.visibility.value} reader {self.owner.__qualname__}.{self.name}>"

    def allows(self, instance, receiver) -> bool:
        if self.visibility is Visibility.PUBLIC:
            return True
        if self.visibility is Visibility.PROTECTED:
            return isinstance(receiver, self.owner)
        return receiver is instance

    def __get__(self, instance, owner=None):
        if instance is None:
            return self
        if not self.allows(instance, _receiver(sys._getframe(1))):
            raise AccessError(
                f"{self.visibility.value} attribute {self.name!r} of "
                f"{type(instance).__name__!r} object is not accessible"
            )
        try:
            return vars(instance)[self.name]
        except KeyError:
            raise AttributeError(
                f"{type(instance).__name__!r} object has no attribute {self.name!r}"
            ) from None

    def __set__(self, instance, value):
        if _receiver(sys._getframe(1)) is not instance:
            raise AttributeError(f"can't set read-only attribute {self.name!r}")
        vars(instance)[self.name] = value

    def __delete__(self, instance):
        if _receiver(sys._getframe(1)) is not instance:
            raise AttributeError(f"can't delete read-only attribute {self.name!r}")
        vars(instance).pop(self.name, None)


def install(cls: type, names: Iterable[str], visibility: Any) -> Visibility:
    """Install a reader per name on cls; returns the resolved visibility."""
    resolved = Visibility.resolve(visibility)
    for name in names:
        setattr(cls, name, Reader(name, cls, resolved))
    return resolved
