from __future__ import annotations
import typing
from ..types import *
from ..containers import as_sequence, guarded_iter

if typing.TYPE_CHECKING:
    from ..query import Query


def _require_callable(func: Any, role: str) -> None:
    if not callable(func):
        raise TypeError(f"{role} must be callable, got {type(func).__name__}")


def select(container: Any, selector: Selector[T, U]) -> Any:
    """project each element to a new form, into a new container of the same shape"""
    _require_callable(selector, 'selector')
    seq = as_sequence(container)
    result = seq.new_empty()
    for item in seq:
        result.append(selector(item))
    return result.export()


def where(container: Any, predicate: Predicate[T]) -> Any:
    """filter elements based on a predicate, into a new container of the same shape"""
    _require_callable(predicate, 'predicate')
    seq = as_sequence(container)
    result = seq.new_empty()
    for item in seq:
        if predicate(item):
            result.append(item)
    return result.export()


def where_lazy(container: Any, predicate: Predicate[T]) -> LazySequence[T]:
    """
    filter elements lazily. the predicate runs only as the consumer pulls,
    and the source must stay unmodified until the traversal ends.
    """
    _require_callable(predicate, 'predicate')
    seq = as_sequence(container)

    def filter_gen():
        for item in guarded_iter(seq):
            if predicate(item):
                yield item

    return LazySequence(filter_gen(), 'where_lazy')


class _CoreOperations(Generic[T]):
    def where(self: 'Query[T]', predicate: Predicate[T]) -> 'Query[T]':
        """filter elements based on a predicate"""
        from ..query import Query
        return Query(where(self._container, predicate))

    def select(self: 'Query[T]', selector: Selector[T, U]) -> 'Query[U]':
        """project each element to a new form"""
        from ..query import Query
        return Query(select(self._container, selector))

    def where_lazy(self: 'Query[T]', predicate: Predicate[T]) -> LazySequence[T]:
        """filter lazily over the wrapped container"""
        return where_lazy(self._container, predicate)
