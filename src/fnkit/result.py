"""Result 타입 (설정 로드, 법칙 검증 결과)"""
from dataclasses import dataclass
from typing import Any, Callable, TypeVar, Union

from fnkit.functor import Chainable

T = TypeVar('T')
U = TypeVar('U')
E = TypeVar('E')


# ============================================================
# Result Type (OR Type)
# ============================================================

class _Track(Chainable[T]):
    """Success/Failure 공통 (lift는 항상 성공 트랙)"""

    @classmethod
    def of(cls, value: Any) -> 'Success[Any]':
        return Success(value)


@dataclass(frozen=True)
class Success(_Track[T]):
    """성공 트랙"""
    value: T

    def map(self, f: Callable[[T], U]) -> 'Success[U]':
        return Success(f(self.value))

    def chain(self, f: Callable[[T], 'Result[U, Any]']) -> 'Result[U, Any]':
        return f(self.value)

    def __repr__(self) -> str:
        return f"Success({self.value!r})"


@dataclass(frozen=True)
class Failure(_Track[E]):
    """실패 트랙 (map/chain은 그대로 통과)"""
    error: E

    def map(self, f: Callable[[Any], Any]) -> 'Failure[E]':
        return self

    def chain(self, f: Callable[[Any], Any]) -> 'Failure[E]':
        return self

    def __repr__(self) -> str:
        return f"Failure({self.error!r})"


Result = Union[Success[T], Failure[E]]


def bind(
    result: Result[T, E],
    f: Callable[[T], Result[U, E]]
) -> Result[U, E]:
    """Result 반환 함수 체이닝"""
    return result.chain(f)


def validate_all(*results: Result[Any, Any]) -> Result[list[Any], list[Any]]:
    """검증 결과를 모두 모으기 (에러가 하나라도 있으면 Failure)"""
    successes = [r.value for r in results if isinstance(r, Success)]
    failures = [r.error for r in results if isinstance(r, Failure)]
    if failures:
        return Failure(failures)
    return Success(successes)
