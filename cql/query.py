from __future__ import annotations

from .types import *
from .containers import as_sequence

# --- core functionality ---
from .extensions.core import _CoreOperations
from .extensions.mutation import _MutationOperations

# --- accessors ---
from .extensions.set import SetAccessor
from .extensions.join import JoinAccessor
from .extensions.grouping import GroupingAccessor
from .extensions.terminal import TerminalAccessor


class Query(
    _CoreOperations[T],
    _MutationOperations[T]
):
    """
    eager, fluent wrapper around one container.

    where/select hand back a new query over a new container; update, delete
    and the order_by family rewrite the wrapped container in place and return
    the same query. nothing is deferred.
    """
    def __init__(self, container: Any):
        # validates the container type up front
        as_sequence(container)
        self._container = container
        # --- initialize accessors ---
        self.set = SetAccessor(self)
        self.join = JoinAccessor(self)
        self.group = GroupingAccessor(self)
        self.to = TerminalAccessor(self)

    @property
    def container(self) -> Any:
        """the wrapped container itself, not a copy"""
        return self._container

    def __iter__(self) -> Iterator[T]:
        return iter(as_sequence(self._container))

    def __len__(self) -> int:
        return len(as_sequence(self._container))

    def __repr__(self) -> str:
        return f"Query({self._container!r})"
