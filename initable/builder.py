"""Composition units: reusable constructor recipes.

A Builder holds a normalized parameter list and a visibility request.
Attaching it to a class (as a decorator, or via attach()) composes a new
``__init__`` on top of whatever constructor the class already resolves to:

    @Builder(("req", "two"))
    @Builder(("req", "one"))
    class Point:
        pass

    Point(1, 2)   # stores one=1 and two=2; accessors are private

Each attachment wraps the previous constructor, so several units on one
class form a delegation chain just like several levels of subclassing.
"""

from __future__ import annotations

import logging
import threading
from typing import Any

from initable import accessors, constructor
from initable.forwarder import forward
from initable.inheritor import merge
from initable.introspect import Layer, record, signature_of
from initable.parameters import ParameterList, normalize

logger = logging.getLogger(__name__)

# Serializes introspect -> merge -> install for every class.
_lock = threading.RLock()


class Builder:
    """Immutable recipe for constructor and accessor generation."""

    __slots__ = ("parameters", "visibility")

    parameters: ParameterList
    visibility: Any

    def __init__(self, *entries, visibility: Any = accessors.DEFAULT_VISIBILITY, **keywords):
        object.__setattr__(self, "parameters", normalize(entries, keywords))
        object.__setattr__(self, "visibility", visibility)

    def __setattr__(self, name, value):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __delattr__(self, name):
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __repr__(self):
        params = ", ".join(
            p.kind.value if p.name is None else f"{p.kind.value} {p.name}"
            for p in self.parameters
        )
        return f"Builder({params}; visibility={self.visibility!r})"

    @property
    def names(self) -> tuple[str, ...]:
        return self.parameters.names

    def __call__(self, cls: type) -> type:
        return attach(self, cls)


def attach(unit: Builder, cls: type) -> type:
    """Compose unit's constructor and accessors onto cls; returns cls."""
    with _lock:
        ancestor = signature_of(cls)
        merged = merge(ancestor, unit.parameters)
        init = constructor.install(cls, merged, forward(ancestor, merged.signature))
        introduced = tuple(merged.fields)
        visibility = accessors.install(cls, introduced, unit.visibility)
        record(cls, Layer(unit, merged.signature, introduced, visibility, init))

    logger.debug(
        "attached %r to %s: %d parameter(s), new %s field(s) %s",
        unit, cls.__qualname__, len(merged.signature), visibility.value, list(introduced),
    )
    return cls
