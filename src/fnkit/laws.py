"""대수 법칙 검증

각 check_* 함수는 Success(<법칙 이름>) 또는
Failure(LawViolation(...))를 반환한다. verify_* 는 여러 검사를
validate_all로 묶어 위반을 모두 모은다.
"""
from typing import Any, Callable

from fnkit.errors import LawViolation
from fnkit.functor import Chainable, Functor
from fnkit.logger import get_logger
from fnkit.pipeline import compose, flip, identity, pipe
from fnkit.result import Failure, Result, Success, validate_all

_logger = get_logger("laws")

Equals = Callable[[Any, Any], bool]


def _default_equals(left: Any, right: Any) -> bool:
    return left == right


def _check(law: str, expected: Any, actual: Any, equals: Equals) -> Result[str, LawViolation]:
    if equals(expected, actual):
        return Success(law)
    _logger.debug("%s violated: expected %r, got %r", law, expected, actual)
    return Failure(LawViolation(law=law, expected=expected, actual=actual))


# ============================================================
# Functor 법칙
# ============================================================

def check_functor_identity(
    fa: Functor[Any], equals: Equals = _default_equals
) -> Result[str, LawViolation]:
    """fa.map(x => x) == fa"""
    return _check("functor identity", fa, fa.map(identity), equals)


def check_functor_composition(
    fa: Functor[Any],
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    equals: Equals = _default_equals,
) -> Result[str, LawViolation]:
    """fa.map(x => f(g(x))) == fa.map(g).map(f)"""
    return _check(
        "functor composition",
        fa.map(compose(f, g)),
        fa.map(g).map(f),
        equals,
    )


# ============================================================
# Monad 법칙
# ============================================================

def check_left_identity(
    unit: Callable[[Any], Chainable[Any]],
    value: Any,
    f: Callable[[Any], Chainable[Any]],
    equals: Equals = _default_equals,
) -> Result[str, LawViolation]:
    """unit(v).chain(f) == f(v)"""
    return _check("left identity", f(value), unit(value).chain(f), equals)


def check_right_identity(
    m: Chainable[Any],
    unit: Callable[[Any], Chainable[Any]] | None = None,
    equals: Equals = _default_equals,
) -> Result[str, LawViolation]:
    """m.chain(unit) == m"""
    return _check("right identity", m, m.chain(unit or type(m).of), equals)


def check_associativity(
    m: Chainable[Any],
    f: Callable[[Any], Chainable[Any]],
    g: Callable[[Any], Chainable[Any]],
    equals: Equals = _default_equals,
) -> Result[str, LawViolation]:
    """m.chain(f).chain(g) == m.chain(x => f(x).chain(g))"""
    return _check(
        "associativity",
        m.chain(f).chain(g),
        m.chain(lambda x: f(x).chain(g)),
        equals,
    )


# ============================================================
# 합성 법칙
# ============================================================

def check_compose_associativity(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    h: Callable[[Any], Any],
    value: Any,
) -> Result[str, LawViolation]:
    """compose(f, compose(g, h)) == compose(compose(f, g), h)"""
    return _check(
        "compose associativity",
        compose(f, compose(g, h))(value),
        compose(compose(f, g), h)(value),
        _default_equals,
    )


def check_pipe_compose_duality(
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    value: Any,
) -> Result[str, LawViolation]:
    """pipe(f, g) == compose(g, f)"""
    return _check(
        "pipe/compose duality",
        compose(g, f)(value),
        pipe(f, g)(value),
        _default_equals,
    )


def check_flip_involution(
    f: Callable[[Any], Callable[[Any], Any]],
    a: Any,
    b: Any,
) -> Result[str, LawViolation]:
    """flip(flip(f))(a)(b) == f(a)(b)"""
    return _check("flip involution", f(a)(b), flip(flip(f))(a)(b), _default_equals)


# ============================================================
# 묶음 검증
# ============================================================

def verify_functor(
    fa: Functor[Any],
    f: Callable[[Any], Any],
    g: Callable[[Any], Any],
    equals: Equals = _default_equals,
) -> Result[list[str], list[LawViolation]]:
    return validate_all(
        check_functor_identity(fa, equals),
        check_functor_composition(fa, f, g, equals),
    )


def verify_monad(
    unit: Callable[[Any], Chainable[Any]],
    value: Any,
    f: Callable[[Any], Chainable[Any]],
    g: Callable[[Any], Chainable[Any]],
    equals: Equals = _default_equals,
) -> Result[list[str], list[LawViolation]]:
    """functor 법칙 + monad 세 법칙 (m = unit(value))"""
    m = unit(value)
    return validate_all(
        check_functor_identity(m, equals),
        check_left_identity(unit, value, f, equals),
        check_right_identity(m, unit, equals),
        check_associativity(m, f, g, equals),
    )
