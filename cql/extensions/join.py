from __future__ import annotations
import typing
from ..types import *
from .core import _require_callable
from .grouping import group_by

if typing.TYPE_CHECKING:
    from ..query import Query


def join(left: Any, right: Any, left_key: KeySelector[T, K],
         right_key: KeySelector[U, K]) -> Dict[K, JoinPair[Any, Any]]:
    """
    inner equi-join of two containers.

    both sides are grouped once and matched by key, o(n + m). the result maps
    each key present on both sides to a JoinPair of the left group and the
    right group, each in its own container's shape and original order. keys
    follow the left grouping's order.
    """
    _require_callable(left_key, 'left_key')
    _require_callable(right_key, 'right_key')
    left_groups = group_by(left, left_key)
    right_groups = group_by(right, right_key)
    return {key: JoinPair(group, right_groups[key])
            for key, group in left_groups.items() if key in right_groups}


class JoinAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def join(self, other: Any, left_key: KeySelector[T, K],
             right_key: KeySelector[U, K]) -> Dict[K, JoinPair[Any, Any]]:
        """inner join with another container (or query)"""
        from ..query import Query
        if isinstance(other, Query):
            other = other._container
        return join(self._query._container, other, left_key, right_key)

    def pairs(self, other: Any, left_key: KeySelector[T, K],
              right_key: KeySelector[U, K]) -> List[Tuple[T, U]]:
        """flatten the join into (left, right) element pairs, key by key"""
        return [(l, r)
                for match in self.join(other, left_key, right_key).values()
                for l in match.left
                for r in match.right]
