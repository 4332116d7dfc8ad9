"""커링 유틸리티

curry는 n항 함수를 "필요한 인자가 모두 모일 때까지" 호출을 이어받는
함수로 바꾼다. 한 번에 몇 개씩 넘기든 결과는 같다::

    add4 = curry(lambda a, b, c, d: a + b + c + d)
    add4(1, 2, 3, 4) == add4(1)(2, 3)(4) == add4(1)(2)(3)(4) == 10

지금까지 받은 인자는 클로저가 아니라 불변 CurryState에 담겨
호출마다 새 상태로 전달된다.
"""
import inspect
from dataclasses import dataclass
from functools import update_wrapper
from typing import Any, Callable, Generic

from fnkit.types import A, B, C, R, Arity

_POSITIONAL = (
    inspect.Parameter.POSITIONAL_ONLY,
    inspect.Parameter.POSITIONAL_OR_KEYWORD,
)


def required_parameters(func: Callable[..., Any]) -> tuple[str, ...]:
    """기본값 없는 위치 인자 이름 (선언 순서)"""
    return tuple(
        p.name
        for p in inspect.signature(func).parameters.values()
        if p.kind in _POSITIONAL and p.default is inspect.Parameter.empty
    )


def arity(func: Callable[..., Any]) -> Arity:
    """선언된 arity (기본값/가변 인자 제외)"""
    if isinstance(func, Curried):
        return func.arity
    return Arity(len(required_parameters(func)))


# ============================================================
# 부분 적용 상태 (불변)
# ============================================================

@dataclass(frozen=True)
class CurryState:
    """누적된 인자와 필요한 인자 목록"""
    required: tuple[str, ...]
    args: tuple[Any, ...] = ()
    kwargs: tuple[tuple[str, Any], ...] = ()

    @property
    def supplied(self) -> int:
        """필수 인자에 대해 받은 개수 (위치 인자 + 필수 인자 이름의 키워드)"""
        named = {k for k, _ in self.kwargs}
        return len(self.args) + sum(1 for name in self.required if name in named)

    @property
    def remaining(self) -> int:
        return max(len(self.required) - self.supplied, 0)

    @property
    def saturated(self) -> bool:
        # 개수만 비교: 같거나 많으면 호출하고 인자 충돌은 func가 TypeError로 알림
        return self.supplied >= len(self.required)

    def extend(self, args: tuple[Any, ...], kwargs: dict[str, Any]) -> 'CurryState':
        """새 인자를 뒤에 붙인 상태 반환"""
        merged = dict(self.kwargs)
        merged.update(kwargs)
        return CurryState(
            required=self.required,
            args=self.args + tuple(args),
            kwargs=tuple(merged.items()),
        )


class Curried(Generic[R]):
    """커링된 함수"""

    def __init__(self, func: Callable[..., R], state: CurryState):
        self._func = func
        self._state = state
        update_wrapper(self, func)

    @property
    def state(self) -> CurryState:
        return self._state

    @property
    def arity(self) -> Arity:
        """남은 arity"""
        return Arity(self._state.remaining)

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        state = self._state.extend(args, kwargs)
        if state.saturated:
            return self._func(*state.args, **dict(state.kwargs))
        return Curried(self._func, state)

    def __repr__(self) -> str:
        name = getattr(self._func, "__qualname__", repr(self._func))
        supplied = [repr(a) for a in self._state.args]
        supplied += [f"{k}={v!r}" for k, v in self._state.kwargs]
        return f"curry({name})({', '.join(supplied)})"


def curry(func: Callable[..., R]) -> Curried[R]:
    """n항 함수 커링 (데코레이터로도 사용)"""
    if isinstance(func, Curried):
        return func
    return Curried(func, CurryState(required=required_parameters(func)))


def curry2(f: Callable[[A, B], C]) -> Callable[[A], Callable[[B], C]]:
    """2인자 함수 커링"""
    return lambda a: lambda b: f(a, b)


def uncurry2(f: Callable[[A], Callable[[B], C]]) -> Callable[[A, B], C]:
    """커링된 2단계 함수를 2인자 함수로"""
    return lambda a, b: f(a)(b)
