"""비동기 지연 계산 (asyncio 기반 Chainable)

Deferred는 "아직 실행하지 않은" 코루틴 팩토리를 감싼다. map/chain/then은
새 Deferred를 만들 뿐 실행하지 않으며, run()을 await해야 체인 전체가
순서대로 실행된다. run()을 다시 호출하면 처음부터 다시 실행된다.

실패는 예외로 전파된다. recover()로 처리하지 않으면 run()의 호출자에게
그대로 올라가며, 취소 API는 없다.
"""
import inspect
from typing import Any, Awaitable, Callable, Generator

from fnkit.functor import Chainable
from fnkit.types import T, U


async def _settle(value: Any) -> Any:
    """then 콜백 결과 평탄화: Deferred/awaitable이면 기다린 값"""
    if isinstance(value, Deferred):
        return await value.run()
    if inspect.isawaitable(value):
        return await value
    return value


class Deferred(Chainable[T]):
    """지연된 비동기 결과"""

    def __init__(self, thunk: Callable[[], Awaitable[T]]):
        self._thunk = thunk

    @classmethod
    def of(cls, value: Any) -> 'Deferred[Any]':
        async def resolved() -> Any:
            return value
        return cls(resolved)

    @classmethod
    def failed(cls, error: BaseException) -> 'Deferred[Any]':
        async def rejected() -> Any:
            raise error
        return cls(rejected)

    @classmethod
    def from_async(
        cls, fn: Callable[[Any], Awaitable[U]]
    ) -> Callable[[Any], 'Deferred[U]']:
        """async 단항 함수를 Kleisli stage로"""
        def stage(value: Any) -> 'Deferred[U]':
            return cls(lambda: fn(value))
        return stage

    def map(self, f: Callable[[T], U]) -> 'Deferred[U]':
        async def mapped() -> U:
            return f(await self.run())
        return Deferred(mapped)

    def chain(self, f: Callable[[T], 'Deferred[U]']) -> 'Deferred[U]':
        async def chained() -> U:
            return await f(await self.run()).run()
        return Deferred(chained)

    def then(self, f: Callable[[T], Any]) -> 'Deferred[Any]':
        """Promise.then: 콜백이 값/awaitable/Deferred 무엇을 돌려줘도 평탄화"""
        async def continued() -> Any:
            return await _settle(f(await self.run()))
        return Deferred(continued)

    def recover(self, handler: Callable[[Exception], Any]) -> 'Deferred[Any]':
        """실패 시 handler 결과로 대체"""
        async def recovered() -> Any:
            try:
                return await self.run()
            except Exception as exc:
                return await _settle(handler(exc))
        return Deferred(recovered)

    async def run(self) -> T:
        return await self._thunk()

    def __await__(self) -> Generator[Any, None, T]:
        return self.run().__await__()

    def __repr__(self) -> str:
        return f"Deferred({getattr(self._thunk, '__qualname__', self._thunk)!r})"
