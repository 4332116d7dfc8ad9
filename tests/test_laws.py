import pytest

from fnkit.errors import LawViolation, error_to_dict
from fnkit.laws import (
    check_associativity,
    check_compose_associativity,
    check_flip_involution,
    check_functor_identity,
    check_left_identity,
    check_pipe_compose_duality,
    check_right_identity,
    verify_functor,
    verify_monad,
)
from fnkit.functor import Chainable
from fnkit.monads import Identity, ListM, Maybe
from fnkit.result import Failure, Success


def inc(n):
    return n + 1


def double(n):
    return n * 2


@pytest.mark.parametrize("unit", [Identity.of, Maybe.of, ListM.of, Success.of])
def test_builtin_monads_satisfy_laws(unit):
    f = lambda n: unit(inc(n))  # noqa: E731
    g = lambda n: unit(double(n))  # noqa: E731
    result = verify_monad(unit, 20, f, g)
    assert isinstance(result, Success)
    assert result.value == [
        "functor identity",
        "left identity",
        "right identity",
        "associativity",
    ]


def test_individual_monad_laws():
    f = lambda n: Identity(n + 1)  # noqa: E731
    g = lambda n: Identity(n * 2)  # noqa: E731
    m = Identity(20)
    assert check_left_identity(Identity.of, 20, f) == Success("left identity")
    assert check_right_identity(m) == Success("right identity")
    assert check_associativity(m, f, g) == Success("associativity")


def test_verify_functor():
    assert isinstance(verify_functor(ListM((1, 2)), inc, double), Success)


def test_composition_laws():
    assert isinstance(check_compose_associativity(str, double, inc, 20), Success)
    assert isinstance(check_pipe_compose_duality(inc, double, 20), Success)
    assert isinstance(check_flip_involution(lambda a: lambda b: a - b, 3, 10), Success)


class Broken(Chainable):
    """map이 값을 바꾸는 잘못된 functor"""

    def __init__(self, value):
        self.value = value

    @classmethod
    def of(cls, value):
        return cls(value)

    def map(self, f):
        return Broken(f(self.value) + 1)

    def chain(self, f):
        return Broken(0)

    def __eq__(self, other):
        return isinstance(other, Broken) and other.value == self.value

    def __repr__(self):
        return f"Broken({self.value})"


def test_violations_are_reported_as_values():
    result = check_functor_identity(Broken(1))
    assert isinstance(result, Failure)
    assert result.error == LawViolation(
        law="functor identity", expected=Broken(1), actual=Broken(2)
    )
    assert error_to_dict(result.error)["code"] == "LAW_VIOLATION"


def test_verify_monad_accumulates_violations():
    result = verify_monad(Broken.of, 1, Broken.of, Broken.of)
    assert isinstance(result, Failure)
    laws = [v.law for v in result.error]
    assert laws == ["functor identity", "left identity", "right identity"]


def test_custom_equality():
    result = check_functor_identity(Broken(1), equals=lambda a, b: True)
    assert result == Success("functor identity")
