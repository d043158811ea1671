"""Parameter descriptors and parameter lists.

A descriptor is a small tuple naming one constructor parameter:

    ("req", "one")            # required positional
    ("opt", "two", 2)         # optional positional, default 2
    ("rest", "three")         # *three   (("rest",) is anonymous)
    ("keyreq", "four")        # required keyword
    ("key", "five", 5)        # optional keyword, default 5
    ("keyrest", "six")        # **six    (("keyrest",) is anonymous)
    ("block", "seven")        # callable argument, defaults to None

normalize() turns raw tuples plus ``name=default`` keyword pairs into a
frozen ParameterList.
"""

from __future__ import annotations

import keyword
from dataclasses import dataclass, field
from enum import Enum
from typing import Any


class MalformedDescriptor(ValueError):
    """Raised when a raw descriptor can't describe a constructor parameter."""


class Kind(str, Enum):
    """The seven parameter categories, in canonical signature order."""

    REQ = "req"
    OPT = "opt"
    REST = "rest"
    KEYREQ = "keyreq"
    KEY = "key"
    KEYREST = "keyrest"
    BLOCK = "block"

    @property
    def variadic(self) -> bool:
        """True for kinds a signature can hold only once."""
        return self in (Kind.REST, Kind.KEYREST, Kind.BLOCK)

    @property
    def takes_default(self) -> bool:
        return self in (Kind.OPT, Kind.KEY, Kind.BLOCK)

    @property
    def positional(self) -> bool:
        return self in (Kind.REQ, Kind.OPT)


@dataclass(frozen=True)
class Parameter:
    kind: Kind
    name: str | None = None
    default: Any = None

    @property
    def anonymous(self) -> bool:
        return self.name is None


@dataclass(frozen=True)
class ParameterList:
    """Ordered descriptors as declared, plus their de-duplicated names."""

    parameters: tuple[Parameter, ...] = ()
    names: tuple[str, ...] = field(init=False)

    def __post_init__(self):
        seen: dict[str, None] = {}
        for p in self.parameters:
            if p.name is not None:
                seen.setdefault(p.name)
        object.__setattr__(self, "names", tuple(seen))

    def __iter__(self):
        return iter(self.parameters)

    def __len__(self) -> int:
        return len(self.parameters)

    def by_kind(self, kind: Kind) -> tuple[Parameter, ...]:
        return tuple(p for p in self.parameters if p.kind is kind)


def _kind(raw: Any) -> Kind:
    try:
        return Kind(raw)
    except ValueError:
        raise MalformedDescriptor(f"unknown parameter kind: {raw!r}") from None


def _parameter(entry: Any) -> Parameter:
    if not isinstance(entry, (tuple, list)) or not 1 <= len(entry) <= 3:
        raise MalformedDescriptor(
            f"descriptor must be (kind,), (kind, name) or (kind, name, default): {entry!r}"
        )
    kind = _kind(entry[0])
    name = entry[1] if len(entry) > 1 else None

    if name is None:
        if kind not in (Kind.REST, Kind.KEYREST):
            raise MalformedDescriptor(f"{kind.value} parameter needs a name: {entry!r}")
    elif not isinstance(name, str) or not name.isidentifier() or keyword.iskeyword(name):
        raise MalformedDescriptor(f"invalid parameter name: {name!r}")

    if len(entry) == 3 and not kind.takes_default:
        raise MalformedDescriptor(f"{kind.value} parameter can't have a default: {entry!r}")

    return Parameter(kind, name, entry[2] if len(entry) == 3 else None)


def normalize(entries=(), keywords: dict[str, Any] | None = None) -> ParameterList:
    """Build a ParameterList from raw descriptor tuples and keyword pairs.

    Keyword pairs become optional keyword parameters, appended after the
    tuple entries in insertion order.
    """
    parameters = [_parameter(entry) for entry in entries]
    for name, default in (keywords or {}).items():
        parameters.append(_parameter((Kind.KEY, name, default)))

    for kind in (Kind.REST, Kind.KEYREST, Kind.BLOCK):
        if sum(1 for p in parameters if p.kind is kind) > 1:
            raise MalformedDescriptor(f"more than one {kind.value} parameter declared")

    return ParameterList(tuple(parameters))
