from __future__ import annotations
from abc import ABC, abstractmethod
from functools import cmp_to_key
from .types import *


# --- comparator adapter ---

def _three_way(less: LessThan[T]) -> Callable[[T, T], int]:
    """turn a strict-weak-ordering less(a, b) into a cmp function"""
    def compare(a: T, b: T) -> int:
        if less(a, b): return -1
        if less(b, a): return 1
        return 0
    return compare


# --- capability interface ---

class ISequence(ABC, Generic[T]):
    """
    the minimal sequence capability every query operation is written against:
    append, forward iteration, erase-by-predicate, in-place rewrite and a
    shape-specific in-place sort.
    """
    _version: int = 0

    @abstractmethod
    def __iter__(self) -> Iterator[T]:
        pass

    @abstractmethod
    def __len__(self) -> int:
        pass

    @abstractmethod
    def append(self, item: T) -> None:
        """add an element at the end"""
        pass

    @abstractmethod
    def remove_where(self, predicate: Predicate[T]) -> int:
        """remove matching elements in place, returning how many were removed"""
        pass

    @abstractmethod
    def replace_each(self, func: Callable[[T], T]) -> None:
        """store func(element) back into each position, in iteration order"""
        pass

    @abstractmethod
    def sort_in_place(self, less: LessThan[T]) -> None:
        """reorder the elements using the fastest strategy for this layout"""
        pass

    @abstractmethod
    def new_empty(self) -> 'ISequence[Any]':
        """an empty container of the same concrete shape"""
        pass

    @property
    def version(self) -> Any:
        """changes whenever the container is modified"""
        return self._version

    def export(self) -> Any:
        """the object handed back to callers for results of this shape"""
        return self

    def extend(self, items: Iterable[T]) -> None:
        for item in items:
            self.append(item)

    def to_list(self) -> List[T]:
        return list(self)

    def copy(self) -> 'ISequence[T]':
        result = self.new_empty()
        result.extend(self)
        return result

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, (ISequence, list, tuple)):
            return len(self) == len(other) and all(a == b for a, b in zip(self, other))
        return NotImplemented

    # mutable containers are not hashable
    __hash__ = None

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.to_list()!r})"


# --- contiguous shape ---

class ArrayList(ISequence[T]):
    """contiguous, random-access sequence backed by a python list"""

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._items: List[T] = list(items) if items is not None else []
        self._version = 0

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index):
        if isinstance(index, slice):
            return type(self)(self._items[index])
        return self._items[index]

    def __setitem__(self, index: int, value: T) -> None:
        self._items[index] = value
        self._version += 1

    def append(self, item: T) -> None:
        self._items.append(item)
        self._version += 1

    def clear(self) -> None:
        self._items.clear()
        self._version += 1

    def remove_where(self, predicate: Predicate[T]) -> int:
        """compact survivors to the front, then truncate once"""
        items = self._items
        write = 0
        try:
            for read in range(len(items)):
                item = items[read]
                if not predicate(item):
                    items[write] = item
                    write += 1
        except BaseException:
            # keep the unvisited tail so no element is lost
            del items[write:read]
            self._version += 1
            raise
        removed = len(items) - write
        del items[write:]
        self._version += 1
        return removed

    def replace_each(self, func: Callable[[T], T]) -> None:
        items = self._items
        self._version += 1
        for index in range(len(items)):
            items[index] = func(items[index])

    def sort_in_place(self, less: LessThan[T]) -> None:
        """timsort over the backing list (stable)"""
        self._version += 1
        self._items.sort(key=cmp_to_key(_three_way(less)))

    def new_empty(self) -> 'ArrayList[Any]':
        return type(self)()


class _ListView(ArrayList[T]):
    """aliases a caller's plain list so in-place operations reach it"""

    def __init__(self, items: List[T]):
        self._items = items
        self._version = 0

    @property
    def version(self) -> Any:
        # the caller can grow or shrink the list behind our back
        return self._version, len(self._items)

    def export(self) -> List[T]:
        return self._items

    def new_empty(self) -> '_ListView[Any]':
        return _ListView([])


# --- linked shape ---

class _Node:
    __slots__ = ('value', 'prev', 'next')

    def __init__(self, value: Any = None):
        self.value = value
        self.prev: '_Node' = self
        self.next: '_Node' = self


class LinkedList(ISequence[T]):
    """doubly-linked sequence with a sentinel node"""

    def __init__(self, items: Optional[Iterable[T]] = None):
        self._sentinel = _Node()
        self._size = 0
        self._version = 0
        if items is not None:
            self.extend(items)

    def _link_before(self, anchor: _Node, value: T) -> None:
        node = _Node(value)
        node.prev, node.next = anchor.prev, anchor
        anchor.prev.next = node
        anchor.prev = node
        self._size += 1
        self._version += 1

    def _unlink(self, node: _Node) -> None:
        # node.next is left intact so a live iterator can step past it
        node.prev.next = node.next
        node.next.prev = node.prev
        self._size -= 1
        self._version += 1

    def __iter__(self) -> Iterator[T]:
        node = self._sentinel.next
        while node is not self._sentinel:
            yield node.value
            node = node.next

    def __reversed__(self) -> Iterator[T]:
        node = self._sentinel.prev
        while node is not self._sentinel:
            yield node.value
            node = node.prev

    def __len__(self) -> int:
        return self._size

    def append(self, item: T) -> None:
        self._link_before(self._sentinel, item)

    def appendleft(self, item: T) -> None:
        self._link_before(self._sentinel.next, item)

    def front(self) -> T:
        if not self._size: raise IndexError("front from an empty list")
        return self._sentinel.next.value

    def back(self) -> T:
        if not self._size: raise IndexError("back from an empty list")
        return self._sentinel.prev.value

    def clear(self) -> None:
        self._sentinel.prev = self._sentinel.next = self._sentinel
        self._size = 0
        self._version += 1

    def remove_where(self, predicate: Predicate[T]) -> int:
        """unlink matching nodes, o(1) per removal"""
        removed = 0
        node = self._sentinel.next
        while node is not self._sentinel:
            following = node.next
            if predicate(node.value):
                self._unlink(node)
                removed += 1
            node = following
        return removed

    def replace_each(self, func: Callable[[T], T]) -> None:
        self._version += 1
        node = self._sentinel.next
        while node is not self._sentinel:
            node.value = func(node.value)
            node = node.next

    def sort_in_place(self, less: LessThan[T]) -> None:
        """
        stable sort by relinking nodes; values never move between nodes.
        the ring is only rebuilt after the ordering succeeded, so a failing
        comparator leaves the list untouched.
        """
        if self._size < 2:
            return
        nodes = []
        node = self._sentinel.next
        while node is not self._sentinel:
            nodes.append(node)
            node = node.next
        compare = _three_way(less)
        nodes.sort(key=cmp_to_key(lambda a, b: compare(a.value, b.value)))

        prev = self._sentinel
        for node in nodes:
            prev.next, node.prev = node, prev
            prev = node
        prev.next, self._sentinel.prev = self._sentinel, prev
        self._version += 1

    def new_empty(self) -> 'LinkedList[Any]':
        return type(self)()


# --- adapters ---

def as_sequence(container: Any) -> ISequence[Any]:
    """view a supported container through the sequence capability"""
    if isinstance(container, ISequence):
        return container
    if isinstance(container, list):
        return _ListView(container)
    raise TypeError(f"unsupported container type: {type(container).__name__}")


def guarded_iter(seq: ISequence[T]) -> Iterator[T]:
    """
    iterate seq, raising if it is modified between two pulls.
    used by the lazy operations, which keep no snapshot of their source.
    """
    expected = seq.version
    iterator = iter(seq)
    while True:
        if seq.version != expected:
            raise RuntimeError("collection was modified during lazy traversal")
        try:
            item = next(iterator)
        except StopIteration:
            return
        yield item
