"""Generated ``__init__`` for a merged signature.

No source text is synthesized: the constructor is a closure over the
rendered inspect.Signature, the field table and the forwarding arguments.
Fields are stored before the ancestor constructor runs, so an ancestor
that freezes the instance at the end of its own ``__init__`` still sees
them in place.
"""

from __future__ import annotations

import inspect
from typing import Callable

from initable.forwarder import Forwarding
from initable.inheritor import Merge
from initable.parameters import Kind, ParameterList

ANONYMOUS_NAMES = {Kind.REST: "args", Kind.KEYREST: "kwargs"}

_STYLES = {
    Kind.REQ: inspect.Parameter.POSITIONAL_OR_KEYWORD,
    Kind.OPT: inspect.Parameter.POSITIONAL_OR_KEYWORD,
    Kind.REST: inspect.Parameter.VAR_POSITIONAL,
    Kind.KEYREQ: inspect.Parameter.KEYWORD_ONLY,
    Kind.KEY: inspect.Parameter.KEYWORD_ONLY,
    Kind.BLOCK: inspect.Parameter.KEYWORD_ONLY,
    Kind.KEYREST: inspect.Parameter.VAR_KEYWORD,
}

# Python wants **kwargs last, after keyword-only parameters.
_RENDER_ORDER = (Kind.REQ, Kind.OPT, Kind.REST, Kind.KEYREQ, Kind.KEY, Kind.BLOCK, Kind.KEYREST)


def _unique(name: str, taken: set[str]) -> str:
    while name in taken:
        name = "_" + name
    return name


def render(signature: ParameterList) -> tuple[inspect.Signature, list[str]]:
    """Render a parameter list as an inspect.Signature.

    Returns the signature and, aligned with ``signature.parameters``, the
    name each parameter is bound under.
    """
    taken = set(signature.names)
    names = []
    for p in signature:
        names.append(p.name if p.name is not None else _unique(ANONYMOUS_NAMES[p.kind], taken))

    rendered = []
    for kind in _RENDER_ORDER:
        for p, name in zip(signature, names):
            if p.kind is not kind:
                continue
            if kind in (Kind.REQ, Kind.KEYREQ, Kind.REST, Kind.KEYREST):
                default = inspect.Parameter.empty
            else:
                default = p.default
            rendered.append(inspect.Parameter(name, _STYLES[kind], default=default))
    return inspect.Signature(rendered), names


def install(cls: type, merged: Merge, forwarding: Forwarding) -> Callable:
    """Replace ``cls.__init__`` and return the new function."""
    signature, names = render(merged.signature)
    rest = [names[i] for i, p in enumerate(merged.signature) if p.kind is Kind.REST]
    fields = [(field, names[index]) for field, index in merged.fields.items()]
    previous = cls.__dict__.get("__init__")

    def __init__(self, /, *args, **kwargs):
        bound = signature.bind(*args, **kwargs)
        bound.apply_defaults()
        arguments = bound.arguments
        for name in rest:
            arguments[name] = list(arguments[name])

        namespace = vars(self)
        for field, source in fields:
            namespace[field] = arguments[source]

        call_args, call_kwargs = forwarding.split([arguments[name] for name in names])
        if previous is None:
            super(cls, self).__init__(*call_args, **call_kwargs)
        else:
            previous(self, *call_args, **call_kwargs)

    receiver = inspect.Parameter(_unique("self", set(names)), inspect.Parameter.POSITIONAL_ONLY)
    __init__.__signature__ = signature.replace(
        parameters=[receiver, *signature.parameters.values()]
    )
    __init__.__qualname__ = f"{cls.__qualname__}.__init__"
    __init__.__module__ = cls.__module__
    cls.__init__ = __init__
    return __init__
