"""Declarative constructors composed across inheritance.

A unit lists constructor parameters; attaching it to a class generates
``__init__`` and read accessors, merged with the constructor the class
already has (from a base class or an earlier unit):

    import initable

    @initable.public(("req", "name"), ("opt", "size", 1), label="")
    class Item:
        pass

    item = Item("bolt", 4, label="m4")
    item.size   # 4

Accessors are private unless public() or protected() is used. Units are
immutable and can be attached to any number of classes.
"""

from initable.accessors import AccessError, Visibility
from initable.builder import Builder, attach
from initable.introspect import fields, layers, signature_of
from initable.parameters import Kind, MalformedDescriptor, Parameter, ParameterList, normalize

__version__ = "0.1.0"

__all__ = [
    "__version__",
    "unit", "private", "protected", "public",
    "Builder", "attach",
    "fields", "layers", "signature_of",
    "Kind", "Parameter", "ParameterList", "normalize",
    "Visibility",
    "MalformedDescriptor", "AccessError",
]


def unit(*entries, visibility=Visibility.PRIVATE, **keywords) -> Builder:
    return Builder(*entries, visibility=visibility, **keywords)


def private(*entries, **keywords) -> Builder:
    return Builder(*entries, visibility=Visibility.PRIVATE, **keywords)


def protected(*entries, **keywords) -> Builder:
    return Builder(*entries, visibility=Visibility.PROTECTED, **keywords)


def public(*entries, **keywords) -> Builder:
    return Builder(*entries, visibility=Visibility.PUBLIC, **keywords)
