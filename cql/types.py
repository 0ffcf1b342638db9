from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
LessThan = Callable[[T, T], bool]
Updater = Callable[[T], Optional[T]]


class JoinPair(Generic[T, U]):
    """matched left and right groups for one join key"""

    __slots__ = ('left', 'right')

    def __init__(self, left: Any, right: Any):
        self.left = left
        self.right = right

    # unpacks like a 2-tuple: left, right = pair
    def __iter__(self) -> Iterator[Any]:
        yield self.left
        yield self.right

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, JoinPair):
            return self.left == other.left and self.right == other.right
        if isinstance(other, tuple) and len(other) == 2:
            return self.left == other[0] and self.right == other[1]
        return NotImplemented

    def __repr__(self) -> str:
        return f"JoinPair(left={self.left!r}, right={self.right!r})"


class LazySequence(Generic[T]):
    """
    one-shot, pull-driven sequence over a generator.
    nothing is computed until the first next(); a finished or closed sequence
    stays finished, iterating it again yields nothing. use close() or a
    with-block to release per-traversal state when abandoning early.
    """

    def __init__(self, generator: Iterator[T], name: str = 'lazy'):
        self._generator = generator
        self._name = name
        self._done = False
        self._produced = 0

    def __iter__(self) -> Iterator[T]:
        return self

    def __next__(self) -> T:
        if self._done:
            raise StopIteration
        try:
            item = next(self._generator)
        except BaseException:
            # exhausted or failed generators cannot resume
            self._done = True
            raise
        self._produced += 1
        return item

    def close(self) -> None:
        """stop production and drop the generator's state"""
        if not self._done:
            self._done = True
            self._generator.close()

    @property
    def exhausted(self) -> bool: return self._done

    @property
    def produced(self) -> int: return self._produced

    def __enter__(self) -> 'LazySequence[T]':
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def __repr__(self) -> str:
        state = 'done' if self._done else 'open'
        return f"LazySequence({self._name}, produced={self._produced}, {state})"
