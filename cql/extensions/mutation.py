from __future__ import annotations
import typing
from ..types import *
from ..containers import as_sequence
from .core import _require_callable

if typing.TYPE_CHECKING:
    from ..query import Query

_MISSING = object()


def update(container: Any, predicate_or_updater: Callable, updater: Any = _MISSING,
           *, where: Optional[Predicate[T]] = None) -> None:
    """
    rewrite elements in place, in iteration order.

    update(c, updater) touches every element; update(c, predicate, updater)
    or update(c, updater, where=predicate) only the matching ones.
    the updater returns the replacement value, or None to keep the element
    it mutated in place. failures propagate and earlier replacements stay.
    """
    if updater is _MISSING:
        predicate, updater = where, predicate_or_updater
    else:
        if where is not None:
            raise TypeError("predicate given both positionally and as 'where'")
        predicate = predicate_or_updater
    _require_callable(updater, 'updater')
    if predicate is not None:
        _require_callable(predicate, 'predicate')

    def apply(item):
        if predicate is not None and not predicate(item):
            return item
        replacement = updater(item)
        return item if replacement is None else replacement

    as_sequence(container).replace_each(apply)


def delete(container: Any, predicate: Predicate[T]) -> None:
    """remove every matching element in place, keeping the survivors' order"""
    _require_callable(predicate, 'predicate')
    as_sequence(container).remove_where(predicate)


def order_by(container: Any, comparator: LessThan[T]) -> None:
    """
    sort in place with a strict-weak-ordering comparator less(a, b).
    both shapes sort stably: array lists with timsort over the values,
    linked lists by relinking their nodes.
    """
    _require_callable(comparator, 'comparator')
    as_sequence(container).sort_in_place(comparator)


def order_by_key(container: Any, key_selector: KeySelector[T, K], descending: bool = False) -> None:
    """sort in place by a key, ascending unless descending is set"""
    _require_callable(key_selector, 'key_selector')
    if descending:
        order_by(container, lambda a, b: key_selector(b) < key_selector(a))
    else:
        order_by(container, lambda a, b: key_selector(a) < key_selector(b))


class _MutationOperations(Generic[T]):
    def update(self: 'Query[T]', predicate_or_updater: Callable, updater: Any = _MISSING,
               *, where: Optional[Predicate[T]] = None) -> 'Query[T]':
        """update the wrapped container in place"""
        update(self._container, predicate_or_updater, updater, where=where)
        return self

    def delete(self: 'Query[T]', predicate: Predicate[T]) -> 'Query[T]':
        """delete from the wrapped container in place"""
        delete(self._container, predicate)
        return self

    def order_by(self: 'Query[T]', comparator: LessThan[T]) -> 'Query[T]':
        """sort the wrapped container in place"""
        order_by(self._container, comparator)
        return self

    def order_by_key(self: 'Query[T]', key_selector: KeySelector[T, K], descending: bool = False) -> 'Query[T]':
        """sort the wrapped container in place by a key"""
        order_by_key(self._container, key_selector, descending)
        return self
