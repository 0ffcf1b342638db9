r"""
'    _________  ________    .____
'    \_   ___ \ \_____  \   |    |
'    /    \  \/  /  / \  \  |    |
'    \     \____/   \_/.  \ |    |___
'     \______  /\_____\ \_/ |_______ \
'            \/        \__>         \/
"""
import logging

# the library only logs at debug level; applications decide where it goes
logging.getLogger(__name__).addHandler(logging.NullHandler())

# expose the flat operations
from .extensions.core import select, where, where_lazy
from .extensions.mutation import update, delete, order_by, order_by_key
from .extensions.set import distinct, distinct_lazy
from .extensions.grouping import group_by
from .extensions.join import join

# expose the containers
from .containers import ISequence, ArrayList, LinkedList, as_sequence

# expose the fluent wrapper and its factories
from .query import Query
from .factories import (
    query,
    from_iterable,
    array_list,
    linked_list,
    from_range,
    empty,
    Q
)

# expose supporting types and configuration
from .types import JoinPair, LazySequence
from .config import QueryConfig, get_config, configure, reset_config

# define what `import *` does
__all__ = [
    "select",
    "where",
    "where_lazy",
    "update",
    "delete",
    "order_by",
    "order_by_key",
    "distinct",
    "distinct_lazy",
    "group_by",
    "join",
    "ISequence",
    "ArrayList",
    "LinkedList",
    "as_sequence",
    "Query",
    "query",
    "from_iterable",
    "array_list",
    "linked_list",
    "from_range",
    "empty",
    "Q",
    "JoinPair",
    "LazySequence",
    "QueryConfig",
    "get_config",
    "configure",
    "reset_config"
]
