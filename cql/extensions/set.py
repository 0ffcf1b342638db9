from __future__ import annotations
import logging
import typing
import numpy as np
from ..types import *
from ..config import get_config
from ..containers import as_sequence, guarded_iter

if typing.TYPE_CHECKING:
    from ..query import Query

logger = logging.getLogger(__name__)


def _try_numpy_unique(items: List[Any]) -> Optional[List[Any]]:
    """sorted unique values via numpy for homogeneous int or float data"""
    config = get_config()
    if not config.use_numpy or len(items) < config.numpy_min_size:
        return None
    kinds = {type(x) for x in items}
    if kinds != {int} and kinds != {float}:
        return None
    try:
        arr = np.array(items)
    except (OverflowError, ValueError):
        return None
    # ints beyond int64 land in an object or float64 array; leave those to python
    expected_kinds = "iu" if kinds == {int} else "f"
    if arr.dtype.kind not in expected_kinds:
        return None
    if arr.dtype.kind == 'f' and np.isnan(arr).any():
        return None
    logger.debug(f"distinct: numpy fast path over {len(items)} {arr.dtype} values")
    return np.unique(arr).tolist()


def _sorted_unique(items: List[T]) -> Optional[List[T]]:
    """sort, then drop adjacent duplicates. none when the elements are not orderable"""
    optimized = _try_numpy_unique(items)
    if optimized is not None:
        return optimized
    try:
        ordered = sorted(items)
    except TypeError:
        return None
    unique: List[T] = []
    for item in ordered:
        if not unique or item != unique[-1]:
            unique.append(item)
    # partial orders such as sets sort without raising but can leave equal
    # values apart; a strictly increasing result rules that out
    if any(not a < b for a, b in zip(unique, unique[1:])):
        return None
    return unique


def _first_occurrences(items: List[T]) -> List[T]:
    """order-preserving dedup; hashing when possible, equality scan otherwise"""
    try:
        # dicts keep insertion order, so fromkeys is an order-preserving unique filter
        return list(dict.fromkeys(items))
    except TypeError:
        unique: List[T] = []
        for item in items:
            if item not in unique:
                unique.append(item)
        return unique


def distinct(container: Any, preserve_order: Optional[bool] = None) -> Any:
    """
    return one copy of each distinct value, in a new container of the same shape.

    by default the values come back in ascending order (sort, then dedup).
    elements that cannot be ordered fall back to first-occurrence order.
    preserve_order=True always keeps first-occurrence order; when left as
    None the active config's distinct_strategy decides.
    """
    seq = as_sequence(container)
    if preserve_order is None:
        preserve_order = get_config().distinct_strategy == 'ordered'

    items = list(seq)
    unique = None if preserve_order else _sorted_unique(items)
    if unique is None:
        if not preserve_order:
            logger.debug("distinct: elements are not orderable, keeping first-occurrence order")
        unique = _first_occurrences(items)

    result = seq.new_empty()
    result.extend(unique)
    return result.export()


def distinct_lazy(container: Any) -> LazySequence[T]:
    """
    yield the first occurrence of each value as it is reached.
    the seen-set lives only as long as the traversal and is cleared when it
    finishes, is closed, or is garbage collected.
    """
    seq = as_sequence(container)

    def distinct_gen():
        seen = set()
        seen_unhashable = []
        try:
            for item in guarded_iter(seq):
                try:
                    if item in seen:
                        continue
                    seen.add(item)
                except TypeError:
                    if item in seen_unhashable:
                        continue
                    seen_unhashable.append(item)
                yield item
        finally:
            seen.clear()
            seen_unhashable.clear()

    return LazySequence(distinct_gen(), 'distinct_lazy')


class SetAccessor(Generic[T]):
    """duplicate suppression over the wrapped container, eager or lazy."""
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def distinct(self, preserve_order: Optional[bool] = None) -> 'Query[T]':
        """return distinct elements"""
        from ..query import Query
        return Query(distinct(self._query._container, preserve_order))

    def distinct_lazy(self) -> LazySequence[T]:
        """lazily yield first occurrences"""
        return distinct_lazy(self._query._container)
