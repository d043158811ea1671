"""Tests for the package entry points."""

import inspect

import pytest

import initable
from initable import AccessError, Visibility


def test_private_scope():
    @initable.unit(("key", "one", 1), two=2)
    class Thing:
        pass

    thing = Thing()
    with pytest.raises(AccessError, match="private attribute 'one'"):
        thing.one
    assert vars(thing) == {"one": 1, "two": 2}


def test_explicit_private():
    cls = initable.private(("req", "a"))(type("Thing", (), {}))
    assert cls.__dict__["a"].visibility is Visibility.PRIVATE


def test_protected_scope():
    @initable.protected(("key", "one", 1), two=2)
    class Thing:
        def compare(self, other):
            return self.one == other.one and self.two == other.two

    with pytest.raises(AccessError, match="protected attribute 'one'"):
        Thing().one
    assert Thing().compare(Thing())


def test_public_scope():
    @initable.public(("key", "one", 1), two=2)
    class Thing:
        pass

    thing = Thing(two=3)
    assert (thing.one, thing.two) == (1, 3)


def test_unit_with_unknown_visibility():
    cls = initable.unit(("req", "a"), visibility="friends")(type("Thing", (), {}))
    assert cls.__dict__["a"].visibility is Visibility.PRIVATE


def test_decorators_stack_bottom_up():
    @initable.public(("req", "two"))
    @initable.public(("req", "one"))
    class Pair:
        pass

    assert str(inspect.signature(Pair)) == "(one, two)"
    pair = Pair(1, 2)
    assert (pair.one, pair.two) == (1, 2)
    assert initable.fields(Pair) == ("one", "two")


def test_malformed_descriptor():
    with pytest.raises(initable.MalformedDescriptor):
        initable.public(("keyreq", "a", 1))
