from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *
from ..containers import ArrayList, LinkedList, as_sequence

if typing.TYPE_CHECKING:
    from ..query import Query

class TerminalAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def _items(self) -> Iterable[T]:
        return as_sequence(self._query._container)

    def list(self) -> List[T]:
        """copy into a plain list"""
        return list(self._items())

    def array_list(self) -> ArrayList[T]:
        """copy into a contiguous array list"""
        return ArrayList(self._items())

    def linked(self) -> LinkedList[T]:
        """copy into a doubly-linked list"""
        return LinkedList(self._items())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def series(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(as_sequence(self._query._container))
        return sum(1 for x in self._items() if predicate(x))

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        for item in self._items():
            if predicate is None or predicate(item): return item
        if predicate is None: raise ValueError("sequence contains no elements")
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        # predicate errors still propagate
        for item in self._items():
            if predicate is None or predicate(item): return item
        return default
