"""Effective constructor signature of a class.

Every attachment records a Layer in the class's own namespace. When the
constructor a class currently resolves to is one of those generated
constructors, the layer is the authoritative answer. Any other ``__init__``
is read with inspect.signature, the same way a callPackage-style resolver
reads a function's parameters.
"""

from __future__ import annotations

import inspect
import logging
from dataclasses import dataclass
from typing import Any, Callable

from initable.parameters import Kind, Parameter, ParameterList

logger = logging.getLogger(__name__)

REGISTRY_ATTRIBUTE = "__initable__"

_KINDS = {
    inspect.Parameter.VAR_POSITIONAL: Kind.REST,
    inspect.Parameter.VAR_KEYWORD: Kind.KEYREST,
}

# Accepts anything: used when a constructor can't be introspected.
_OPAQUE = ParameterList((Parameter(Kind.REST), Parameter(Kind.KEYREST)))


@dataclass(frozen=True)
class Layer:
    """One attachment of a composition unit to a class."""

    unit: Any
    signature: ParameterList
    fields: tuple[str, ...]
    visibility: Any
    init: Callable


def layers(cls: type) -> tuple[Layer, ...]:
    """Layers attached directly to cls, oldest first."""
    return cls.__dict__.get(REGISTRY_ATTRIBUTE, ())


def record(cls: type, layer: Layer) -> None:
    setattr(cls, REGISTRY_ATTRIBUTE, layers(cls) + (layer,))


def fields(cls: type) -> tuple[str, ...]:
    """Fields introduced by every layer along the MRO, ancestors first."""
    names: dict[str, None] = {}
    for klass in reversed(cls.__mro__):
        for layer in layers(klass):
            names.update(dict.fromkeys(layer.fields))
    return tuple(names)


def _owner(cls: type) -> type:
    for klass in cls.__mro__:
        if "__init__" in klass.__dict__:
            return klass
    return object


def _convert(p: inspect.Parameter) -> Parameter:
    if p.kind in _KINDS:
        return Parameter(_KINDS[p.kind], p.name)
    required = p.default is inspect.Parameter.empty
    if p.kind is inspect.Parameter.KEYWORD_ONLY:
        return Parameter(Kind.KEYREQ, p.name) if required else Parameter(Kind.KEY, p.name, p.default)
    return Parameter(Kind.REQ, p.name) if required else Parameter(Kind.OPT, p.name, p.default)


def from_callable(init: Callable) -> ParameterList:
    """Read an unbound ``__init__`` and drop its receiver."""
    try:
        sig = inspect.signature(init)
    except (TypeError, ValueError):
        logger.debug("can't introspect %r, treating it as accepting anything", init)
        return _OPAQUE
    params = list(sig.parameters.values())
    if params and params[0].kind in (
        inspect.Parameter.POSITIONAL_ONLY,
        inspect.Parameter.POSITIONAL_OR_KEYWORD,
    ):
        params = params[1:]
    return ParameterList(tuple(_convert(p) for p in params))


def signature_of(cls: type) -> ParameterList:
    """Parameter list the constructor of cls currently accepts."""
    owner = _owner(cls)
    if owner is object:
        return ParameterList()
    init = owner.__dict__["__init__"]
    for layer in reversed(layers(owner)):
        if layer.init is init:
            return layer.signature
    return from_callable(init)
