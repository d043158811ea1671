"""Arguments for the ancestor constructor call.

A generated constructor hands the ancestor exactly the parameters the
ancestor declared, in the ancestor's own calling convention:

    req / opt      -> positional, in the ancestor's order
    rest           -> *spread
    keyreq / key   -> name=value
    keyrest        -> **spread
    block          -> name=value, omitted when no callable was passed

The values come from the combined signature, where every ancestor
parameter sits verbatim.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

from initable.parameters import Kind, ParameterList


@dataclass(frozen=True)
class Argument:
    kind: Kind
    name: str | None
    index: int  # position of the supplying parameter in the combined signature


@dataclass(frozen=True)
class Forwarding:
    arguments: tuple[Argument, ...] = ()

    def split(self, values: Sequence[Any]) -> tuple[list[Any], dict[str, Any]]:
        """Turn combined-signature values into ``(args, kwargs)``."""
        args: list[Any] = []
        kwargs: dict[str, Any] = {}
        for argument in self.arguments:
            value = values[argument.index]
            if argument.kind.positional:
                args.append(value)
            elif argument.kind is Kind.REST:
                args.extend(value)
            elif argument.kind is Kind.KEYREST:
                kwargs.update(value)
            elif argument.kind is Kind.BLOCK:
                if value is not None:
                    kwargs[argument.name] = value
            else:
                kwargs[argument.name] = value
        return args, kwargs


def _locate(combined: ParameterList, kind: Kind, name: str | None) -> int:
    for i, p in enumerate(combined):
        if p.kind is kind and (kind.variadic or p.name == name):
            return i
    raise LookupError(f"{kind.value} parameter {name!r} missing from combined signature")


def forward(ancestor: ParameterList, combined: ParameterList) -> Forwarding:
    """Build the ancestor call for a combined signature.

    An ancestor without a constructor of its own reports an empty
    signature, so the base constructor gets no arguments at all.
    """
    return Forwarding(tuple(
        Argument(p.kind, p.name, _locate(combined, p.kind, p.name))
        for p in ancestor
    ))
