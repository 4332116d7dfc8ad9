"""data-last 컬렉션 함수 (커링됨)

    reject_short = reject(lambda word: len(word) == 4)
    reject_short(["oops", "gasp", "shout", "sun"])  # ["shout", "sun"]
"""
from functools import reduce
from typing import Any, Callable, Iterable

from fnkit.curry import curry
from fnkit.types import T, U


@curry
def fold(reducer: Callable[[U, T], U], initial: U, items: Iterable[T]) -> U:
    """누적값에 요소를 차례로 접기 (reduce)"""
    return reduce(reducer, items, initial)


@curry
def keep(predicate: Callable[[T], bool], items: Iterable[T]) -> list[T]:
    return [x for x in items if predicate(x)]


@curry
def reject(predicate: Callable[[T], bool], items: Iterable[T]) -> list[T]:
    return [x for x in items if not predicate(x)]


@curry
def map_all(f: Callable[[T], U], items: Iterable[T]) -> list[Any]:
    return [f(x) for x in items]
