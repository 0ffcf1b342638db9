from __future__ import annotations
import logging
import typing
from ..types import *
from ..containers import as_sequence, ISequence
from .core import _require_callable

if typing.TYPE_CHECKING:
    from ..query import Query

logger = logging.getLogger(__name__)


def _ordered_keys(groups: Dict[K, Any]) -> List[K]:
    """ascending key order when the keys compare, first-seen order otherwise"""
    try:
        return sorted(groups)
    except TypeError:
        logger.debug("group_by: keys are not orderable, keeping first-seen order")
        return list(groups)


def _group_sequences(container: Any, key_selector: KeySelector[T, K]) -> Dict[K, ISequence[T]]:
    seq = as_sequence(container)
    groups: Dict[K, ISequence[T]] = {}
    for item in seq:
        key = key_selector(item)
        group = groups.get(key)
        if group is None:
            group = groups[key] = seq.new_empty()
        group.append(item)
    return {key: groups[key] for key in _ordered_keys(groups)}


def group_by(container: Any, key_selector: KeySelector[T, K]) -> Dict[K, Any]:
    """
    partition elements by key into containers of the input's shape.
    each group keeps the elements' relative order; keys come back ascending
    when they are mutually orderable, in first-seen order when not.
    """
    _require_callable(key_selector, 'key_selector')
    return {key: group.export() for key, group in _group_sequences(container, key_selector).items()}


class GroupingAccessor(Generic[T]):
    def __init__(self, query_instance: 'Query[T]'):
        self._query = query_instance

    def group_by(self, key_selector: KeySelector[T, K]) -> Dict[K, Any]:
        """group elements by a key"""
        return group_by(self._query._container, key_selector)

    def group_counts(self, key_selector: KeySelector[T, K]) -> Dict[K, int]:
        """size of each group"""
        return {key: len(group) for key, group in self.group_by(key_selector).items()}
