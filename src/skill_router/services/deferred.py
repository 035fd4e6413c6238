"""Uniform handling of immediate and deferred results.

Handlers may be plain functions or coroutines. Everything downstream of a
handler is written once against :func:`map_result`, which keeps an
immediate value immediate and chains onto a deferred one.
"""

import asyncio
import inspect
from collections.abc import Awaitable, Callable, Generator
from typing import Any, Generic, TypeVar, Union

T = TypeVar("T")
U = TypeVar("U")


class Deferred(Generic[T]):
    """A result that completes asynchronously.

    Wraps a single awaitable and is itself awaitable. Like a coroutine, it
    can only be awaited once.
    """

    __slots__ = ("_awaitable",)

    def __init__(self, awaitable: Awaitable[T]):
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, None, T]:
        return self._awaitable.__await__()

    def then(self, transform: Callable[[T], "ValueOrFuture[U]"]) -> "Deferred[U]":
        """Chain ``transform`` onto completion of this result."""

        async def chained() -> U:
            value = await self._awaitable
            return await resolve(transform(value))

        return Deferred(chained())

    def __repr__(self) -> str:
        return f"Deferred({self._awaitable!r})"


ValueOrFuture = Union[T, Deferred[T]]


def lift(value: Any) -> ValueOrFuture[Any]:
    """Tag a raw awaitable as :class:`Deferred`; return anything else unchanged."""
    if is_deferred(value):
        return value
    if inspect.isawaitable(value):
        return Deferred(value)
    return value


def is_deferred(value: Any) -> bool:
    """Whether ``value`` must be awaited before use."""
    return isinstance(value, Deferred)


def map_result(
    value: ValueOrFuture[T],
    transform: Callable[[T], Any],
) -> ValueOrFuture[U]:
    """Apply ``transform`` while preserving immediacy.

    An immediate ``value`` is transformed synchronously and the result is
    returned as-is (deferred only if ``transform`` itself defers). A
    deferred ``value`` yields a :class:`Deferred` of the transformed result.
    Exceptions propagate unchanged.
    """
    value = lift(value)
    if is_deferred(value):
        return value.then(transform)
    return lift(transform(value))


async def resolve(value: ValueOrFuture[T]) -> T:
    """Await ``value`` if it is deferred, otherwise return it."""
    value = lift(value)
    if is_deferred(value):
        return await value
    return value


def run_sync(value: ValueOrFuture[T]) -> T:
    """Drive a deferred result to completion on a new event loop.

    For synchronous hosts. Immediate values are returned without touching
    asyncio.
    """
    value = lift(value)
    if is_deferred(value):
        return asyncio.run(resolve(value))
    return value
