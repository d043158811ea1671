#!/usr/bin/env python3
"""initable: inspect composed constructors."""

import argparse
import importlib
import inspect
import sys

from initable import introspect


def resolve(target: str) -> type:
    """Import ``package.module:Class`` (dotted attribute paths allowed)."""
    module_name, sep, qualname = target.partition(":")
    if not sep or not qualname:
        raise LookupError(f"expected module:Class, got {target!r}")
    obj = importlib.import_module(module_name)
    for part in qualname.split("."):
        obj = getattr(obj, part)
    if not isinstance(obj, type):
        raise LookupError(f"{target} is not a class")
    return obj


def cmd_signature(args):
    cls = resolve(args.target)
    print(f"{cls.__qualname__}{inspect.signature(cls)}")


def cmd_fields(args):
    cls = resolve(args.target)
    if not args.layers:
        for name in introspect.fields(cls):
            print(name)
        return
    for klass in reversed(cls.__mro__):
        for layer in introspect.layers(klass):
            names = " ".join(layer.fields) or "-"
            print(f"{klass.__qualname__}: {layer.visibility.value} {names}")


def main(argv=None):
    parser = argparse.ArgumentParser(prog="initable", description="Inspect composed constructors")
    sub = parser.add_subparsers(dest="command")

    # signature
    p = sub.add_parser("signature", help="Show a class's constructor signature")
    p.add_argument("target", help="module:Class")
    p.set_defaults(func=cmd_signature)

    # fields
    p = sub.add_parser("fields", help="List fields introduced by attached units")
    p.add_argument("target", help="module:Class")
    p.add_argument("--layers", action="store_true", help="Group fields by attachment")
    p.set_defaults(func=cmd_fields)

    args = parser.parse_args(argv)
    if not args.command:
        parser.print_help()
        sys.exit(1)
    try:
        args.func(args)
    except (ImportError, AttributeError, LookupError) as e:
        print(f"initable: {e}", file=sys.stderr)
        sys.exit(2)


if __name__ == "__main__":
    main()
