"""Merge a descendant's declared parameters into an ancestor's signature.

The result is one parameter list that can be rendered as a single
constructor signature:

    ancestor:  (one, two=2, *three, four, five=5, **six, seven=None)
    declared:  (sub="sub")
    combined:  (one, two=2, sub="sub", *three, four, five=5, **six, seven=None)

Kinds are laid out in canonical order. Within a kind the ancestor's
parameters come first and newly declared ones are appended after them.
Whenever a declared name is already owned by the ancestor, the ancestor's
parameter (and its default) wins and no new field is introduced.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from initable.parameters import Kind, Parameter, ParameterList


@dataclass(frozen=True)
class Merge:
    """A combined signature plus the fields first introduced by it.

    ``fields`` maps each new field name to the index of the parameter in
    ``signature`` that supplies its value. A declared ``*items`` merged
    into an ancestor that already has ``*args`` is fed from ``*args``.
    """

    signature: ParameterList
    fields: dict[str, int] = field(default_factory=dict)


def merge(ancestor: ParameterList, declared: ParameterList) -> Merge:
    combined: list[Parameter] = []
    fields: dict[str, int] = {}
    owned = set(ancestor.names)

    for kind in Kind:
        inherited = ancestor.by_kind(kind)
        start = len(combined)
        combined.extend(inherited)

        for p in declared.by_kind(kind):
            if p.name is not None and p.name in owned:
                continue
            if kind.variadic and inherited:
                # Only one such parameter fits in a signature; alias it.
                if p.name is not None:
                    owned.add(p.name)
                    fields[p.name] = start
                continue
            combined.append(p)
            if p.name is not None:
                owned.add(p.name)
                fields[p.name] = len(combined) - 1

    return Merge(ParameterList(tuple(combined)), fields)
