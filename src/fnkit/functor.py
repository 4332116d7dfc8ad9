"""Functor / Chainable 인터페이스"""
from abc import ABC, abstractmethod
from typing import Any, Callable, Generic

from fnkit.curry import curry
from fnkit.types import T, U


class Functor(ABC, Generic[T]):
    """map을 제공하는 컨테이너"""

    @abstractmethod
    def map(self, f: Callable[[T], U]) -> 'Functor[U]':
        """구조를 유지하며 값 변환"""


class Chainable(Functor[T]):
    """lift(of)와 chain을 제공하는 컨테이너 (Monad)"""

    @classmethod
    @abstractmethod
    def of(cls, value: Any) -> 'Chainable[Any]':
        """값을 컨텍스트로 들어올림 (lift)"""

    @abstractmethod
    def chain(self, f: Callable[[T], 'Chainable[U]']) -> 'Chainable[U]':
        """map 후 한 겹 펼치기 (flatMap)"""


def is_functor(value: Any) -> bool:
    return isinstance(value, Functor)


@curry
def fmap(f: Callable[[T], U], functor: Any) -> Any:
    """data-last map: Functor면 .map, 아니면 리스트로"""
    if isinstance(functor, Functor):
        return functor.map(f)
    return list(map(f, functor))


@curry
def chain(f: Callable[[T], Chainable[U]], monad: Chainable[T]) -> Chainable[U]:
    """data-last chain"""
    return monad.chain(f)
