"""함수 합성 유틸리티"""
from functools import reduce
from typing import Any, Callable

from fnkit.curry import Curried, curry
from fnkit.logger import get_logger
from fnkit.types import A, B, C, Kleisli, MethodName, T

_trace_logger = get_logger("trace")


def identity(x: A) -> A:
    """항등 함수"""
    return x


def const(value: A) -> Callable[[B], A]:
    """상수 함수"""
    return lambda _: value


# ============================================================
# 합성 (stage는 모두 단항 함수)
# ============================================================

def pipe(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """왼쪽에서 오른쪽으로 함수 합성"""
    if not funcs:
        return identity

    def apply(x: Any) -> Any:
        return reduce(lambda acc, f: f(acc), funcs, x)
    return apply


def compose(*funcs: Callable[..., Any]) -> Callable[..., Any]:
    """오른쪽에서 왼쪽으로 함수 합성"""
    return pipe(*reversed(funcs))


def flip(f: Callable[[A], Callable[[B], C]]) -> Callable[[B], Callable[[A], C]]:
    """커링된 2단계 함수의 인자 순서 뒤집기 (data-first -> data-last)"""
    return lambda a: lambda b: f(b)(a)


def flip_args(f: Callable[[A, B], C]) -> Callable[[B, A], C]:
    """2인자 함수의 인자 순서 뒤집기"""
    return lambda b, a: f(a, b)


# ============================================================
# Monadic 합성 (Kleisli)
# ============================================================

def _kleisli(method_name: str) -> Callable[[Kleisli, Kleisli], Kleisli]:
    def link(first: Kleisli, then: Kleisli) -> Kleisli:
        return lambda x: getattr(first(x), method_name)(then)
    return link


def pipe_with(method_name: MethodName | str) -> Callable[..., Kleisli]:
    """
    지정한 체이닝 메서드로 왼쪽에서 오른쪽 합성

    pipe_with("then")(f, g, h)(x) == f(x).then(g).then(h)
    """
    link = _kleisli(method_name)

    def composer(*funcs: Kleisli) -> Kleisli:
        if not funcs:
            return identity
        return reduce(link, funcs)
    return composer


def compose_with(method_name: MethodName | str) -> Callable[..., Kleisli]:
    """
    지정한 체이닝 메서드로 오른쪽에서 왼쪽 합성

    compose_with("chain")(f, g, h)(x) == h(x).chain(g).chain(f)
    """
    piped = pipe_with(method_name)

    def composer(*funcs: Kleisli) -> Kleisli:
        return piped(*reversed(funcs))
    return composer


def compose_m(*funcs: Kleisli) -> Kleisli:
    """Chainable.chain 기반 오른쪽에서 왼쪽 합성"""
    return compose_with("chain")(*funcs)


def pipe_m(*funcs: Kleisli) -> Kleisli:
    """Chainable.chain 기반 왼쪽에서 오른쪽 합성"""
    return pipe_with("chain")(*funcs)


# ============================================================
# 파이프라인 관찰
# ============================================================

def _log_line(line: str) -> None:
    _trace_logger.info(line)


def tracer(
    template: str = "{label}: {value}",
    emit: Callable[[str], None] | None = None,
) -> Curried[Any]:
    """label -> value -> value 형태의 trace 생성"""
    sink = emit or _log_line

    def trace(label: str, value: T) -> T:
        sink(template.format(label=label, value=value))
        return value
    return curry(trace)


trace = tracer()


def tap(f: Callable[[T], Any]) -> Callable[[T], T]:
    """부수효과 실행 후 값 그대로 반환"""
    def run(value: T) -> T:
        f(value)
        return value
    return run
