"""Tests for field readers and visibility resolution."""

import pytest

from initable.accessors import AccessError, Reader, Visibility, install


@pytest.mark.parametrize("token, expected", [
    ("public", Visibility.PUBLIC),
    ("protected", Visibility.PROTECTED),
    ("private", Visibility.PRIVATE),
    (Visibility.PUBLIC, Visibility.PUBLIC),
    ("bogus", Visibility.PRIVATE),
    (None, Visibility.PRIVATE),
    (42, Visibility.PRIVATE),
])
def test_resolve(token, expected):
    assert Visibility.resolve(token) is expected


def _make(visibility):
    class Thing:
        def __init__(self, value):
            vars(self)["value"] = value

        def read(self):
            return self.value

        def read_other(self, other):
            return other.value

        def read_in_comprehension(self):
            return [self.value for _ in range(2)]

    install(Thing, ["value"], visibility)
    return Thing


def test_public_reader():
    thing = _make("public")(1)
    assert thing.value == 1
    assert thing.read() == 1


def test_private_reader_denied_outside():
    thing = _make("private")(1)
    with pytest.raises(AccessError, match="private attribute 'value' of 'Thing' object"):
        thing.value
    assert not hasattr(thing, "value")


def test_private_reader_allowed_inside():
    thing = _make("private")(1)
    assert thing.read() == 1
    assert thing.read_in_comprehension() == [1, 1]


def test_private_reader_denied_for_sibling():
    cls = _make("private")
    a, b = cls(1), cls(2)
    with pytest.raises(AccessError):
        a.read_other(b)


def test_protected_reader():
    cls = _make("protected")
    a, b = cls(1), cls(2)
    assert a.read_other(b) == 2
    with pytest.raises(AccessError, match="protected attribute 'value'"):
        b.value


def test_protected_reader_from_subclass():
    cls = _make("protected")

    class Sub(cls):
        def peek(self):
            return self.value

    assert Sub(3).peek() == 3


def test_unknown_visibility_is_private():
    thing = _make("bogus")(1)
    assert not hasattr(thing, "value")
    assert thing.read() == 1


def test_reader_is_read_only():
    thing = _make("public")(1)
    with pytest.raises(AttributeError):
        thing.value = 2
    with pytest.raises(AttributeError):
        del thing.value
    assert thing.value == 1


def test_reader_on_class():
    cls = _make("public")
    assert isinstance(cls.value, Reader)
    assert cls.value.visibility is Visibility.PUBLIC


def test_install_returns_resolved_visibility():
    class Empty:
        pass

    assert install(Empty, [], "protected") is Visibility.PROTECTED


def peek(thing):
    return thing.value


class TestCallingCode:
    def _cls(self):
        class Thing:
            def __init__(self, value):
                vars(self)["value"] = value

            def total(self, others):
                return sum(map(lambda other: self.value, others))

            def helper_total(self):
                def twice():
                    return self.value * 2
                return twice()

            def lazy(self):
                return list(self.value for _ in range(2))

            def reset(self, value):
                self.value = value

            @staticmethod
            def peek(thing):
                return thing.value

        install(Thing, ["value"], "private")
        return Thing

    def test_free_function_denied(self):
        with pytest.raises(AccessError):
            peek(self._cls()(5))

    def test_staticmethod_denied(self):
        cls = self._cls()
        with pytest.raises(AccessError):
            cls.peek(cls(5))

    def test_lambda_outside_denied(self):
        cls = self._cls()
        with pytest.raises(AccessError):
            sorted([cls(2), cls(1)], key=lambda thing: thing.value)

    def test_lambda_inside_method_allowed(self):
        cls = self._cls()
        assert cls(3).total([cls(1), cls(2)]) == 6

    def test_closure_inside_method_allowed(self):
        assert self._cls()(4).helper_total() == 8

    def test_generator_expression_inside_method_allowed(self):
        assert self._cls()(4).lazy() == [4, 4]

    def test_method_may_assign(self):
        thing = self._cls()(1)
        thing.reset(7)
        assert vars(thing)["value"] == 7

    def test_outside_assignment_denied(self):
        thing = self._cls()(1)
        with pytest.raises(AttributeError, match="can't set"):
            thing.value = 2
        assert vars(thing)["value"] == 1
