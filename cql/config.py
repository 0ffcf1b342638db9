import logging
from dataclasses import dataclass, asdict, fields, replace
from typing import Any

logger = logging.getLogger(__name__)

_DISTINCT_STRATEGIES = ('sorted', 'ordered')


@dataclass(frozen=True)
class QueryConfig:
    """configuration for query operations"""
    distinct_strategy: str = 'sorted'  # sorted, ordered
    use_numpy: bool = True
    numpy_min_size: int = 32  # smaller inputs are deduplicated in pure python

    def __post_init__(self):
        if self.distinct_strategy not in _DISTINCT_STRATEGIES:
            raise ValueError(f"distinct_strategy must be one of {_DISTINCT_STRATEGIES}, "
                             f"got '{self.distinct_strategy}'")
        if not isinstance(self.use_numpy, bool):
            raise TypeError("use_numpy must be a bool")
        if not isinstance(self.numpy_min_size, int) or self.numpy_min_size < 0:
            raise ValueError("numpy_min_size must be a non-negative int")


_active = QueryConfig()


def get_config() -> QueryConfig:
    """return the active configuration"""
    return _active


def configure(**overrides: Any) -> QueryConfig:
    """replace fields of the active configuration, returning the new one"""
    global _active
    known = {f.name for f in fields(QueryConfig)}
    unknown = set(overrides) - known
    if unknown:
        raise ValueError(f"unknown config option(s): {', '.join(sorted(unknown))}")
    _active = replace(_active, **overrides)
    logger.debug(f"config: {asdict(_active)}")
    return _active


def reset_config() -> QueryConfig:
    """restore the default configuration"""
    global _active
    _active = QueryConfig()
    return _active
