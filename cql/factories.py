import typing
from .types import *
from .containers import ArrayList, LinkedList

if typing.TYPE_CHECKING:
    from .query import Query

def query(container: Any) -> 'Query[Any]':
    """wrap an existing container without copying it"""
    from .query import Query
    return Query(container)

def from_iterable(data: Iterable[T]) -> 'Query[T]':
    """copy an iterable into a new plain list and wrap it"""
    from .query import Query
    return Query(list(data))

def array_list(data: Iterable[T] = ()) -> 'Query[T]':
    """copy an iterable into a new array list and wrap it"""
    from .query import Query
    return Query(ArrayList(data))

def linked_list(data: Iterable[T] = ()) -> 'Query[T]':
    """copy an iterable into a new linked list and wrap it"""
    from .query import Query
    return Query(LinkedList(data))

def from_range(start: int, count: int) -> 'Query[int]':
    """wrap a new list of consecutive ints"""
    from .query import Query
    return Query(list(range(start, start + count)))

def empty() -> 'Query[Any]':
    """wrap a new empty list"""
    from .query import Query
    return Query([])

# --- aliases ---
Q = query
