"""Process-wide memo cells for values computed at most once."""

import asyncio
from typing import Awaitable, Callable, Generic, Optional, TypeVar

T = TypeVar("T")


class MemoCell(Generic[T]):
    """
    A value that is computed at most once and then kept.
    
    The cell is in one of three states: unresolved, pending (a computation
    is in flight) or resolved. Concurrent callers of ``get`` while a
    computation is pending all await that same computation instead of
    starting their own. A failed computation leaves the cell unresolved so
    the next caller starts over.
    
    A value can also be stored directly with ``set``; it wins over any
    computation still in flight.
    """
    
    def __init__(self) -> None:
        self._resolved = False
        self._value: Optional[T] = None
        self._pending: Optional[asyncio.Task] = None
    
    @property
    def resolved(self) -> bool:
        return self._resolved
    
    @property
    def pending(self) -> bool:
        return self._pending is not None
    
    @property
    def value(self) -> T:
        """The resolved value. Raises LookupError while unresolved."""
        if not self._resolved:
            raise LookupError("MemoCell has no resolved value")
        return self._value  # type: ignore[return-value]
    
    def set(self, value: T) -> None:
        self._value = value
        self._resolved = True
    
    def reset(self) -> None:
        """Forget the resolved value and detach from any pending computation."""
        self._resolved = False
        self._value = None
        self._pending = None
    
    async def get(self, factory: Callable[[], Awaitable[T]]) -> T:
        """
        Return the resolved value, computing it with ``factory`` if needed.
        
        Args:
            factory: Zero-argument coroutine function producing the value
        
        Returns:
            The memoized value
        """
        if self._resolved:
            return self._value  # type: ignore[return-value]
        
        if self._pending is None:
            self._pending = asyncio.ensure_future(self._compute(factory))
        
        return await asyncio.shield(self._pending)
    
    async def _compute(self, factory: Callable[[], Awaitable[T]]) -> T:
        task = asyncio.current_task()
        try:
            value = await factory()
        finally:
            owner = self._pending is task
            if owner:
                self._pending = None
        
        # A reset while computing detaches this task from the cell
        if not owner:
            return value
        if not self._resolved:
            self.set(value)
        return self._value  # type: ignore[return-value]
