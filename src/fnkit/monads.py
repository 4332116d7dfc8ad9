"""동기 Chainable 타입 (Identity, Maybe, List)"""
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator

from fnkit.functor import Chainable
from fnkit.types import T, U


# ============================================================
# Identity
# ============================================================

@dataclass(frozen=True)
class Identity(Chainable[T]):
    """값 하나를 감싸기만 하는 컨텍스트"""
    value: T

    @classmethod
    def of(cls, value: Any) -> 'Identity[Any]':
        return cls(value)

    def map(self, f: Callable[[T], U]) -> 'Identity[U]':
        return Identity(f(self.value))

    def chain(self, f: Callable[[T], 'Identity[U]']) -> 'Identity[U]':
        return f(self.value)

    def __iter__(self) -> Iterator[T]:
        yield self.value

    def __repr__(self) -> str:
        return f"Identity({self.value!r})"


# ============================================================
# Maybe (OR Type: Just | Nothing)
# ============================================================

class Maybe(Chainable[T]):
    """값이 있을 때만 연산을 이어가는 컨텍스트"""

    @classmethod
    def of(cls, value: Any) -> 'Just[Any]':
        return Just(value)

    @classmethod
    def from_optional(cls, value: Any) -> 'Maybe[Any]':
        """None이면 Nothing"""
        if value is None:
            return Nothing
        return Just(value)

    @property
    def is_just(self) -> bool:
        return isinstance(self, Just)

    @property
    def is_nothing(self) -> bool:
        return not self.is_just


@dataclass(frozen=True)
class Just(Maybe[T]):
    value: T

    def map(self, f: Callable[[T], U]) -> 'Just[U]':
        return Just(f(self.value))

    def chain(self, f: Callable[[T], Maybe[U]]) -> Maybe[U]:
        return f(self.value)

    def get_or(self, default: Any) -> T:
        return self.value

    def __repr__(self) -> str:
        return f"Just({self.value!r})"


class NothingType(Maybe[Any]):
    """값 없음 (싱글턴)"""
    _instance: 'NothingType | None' = None

    def __new__(cls) -> 'NothingType':
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def map(self, f: Callable[[Any], Any]) -> 'NothingType':
        return self

    def chain(self, f: Callable[[Any], Any]) -> 'NothingType':
        return self

    def get_or(self, default: U) -> U:
        return default

    def __repr__(self) -> str:
        return "Nothing"


Nothing = NothingType()


# ============================================================
# List
# ============================================================

@dataclass(frozen=True)
class ListM(Chainable[T]):
    """불변 리스트 모나드 (chain은 평탄화)"""
    items: tuple[T, ...] = ()

    @classmethod
    def of(cls, value: Any) -> 'ListM[Any]':
        return cls((value,))

    @classmethod
    def from_iterable(cls, values: Iterable[Any]) -> 'ListM[Any]':
        return cls(tuple(values))

    def map(self, f: Callable[[T], U]) -> 'ListM[U]':
        return ListM(tuple(f(x) for x in self.items))

    def chain(self, f: Callable[[T], 'ListM[U]']) -> 'ListM[U]':
        return ListM(tuple(y for x in self.items for y in f(x)))

    def __iter__(self) -> Iterator[T]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)

    def __repr__(self) -> str:
        return f"ListM({list(self.items)!r})"
