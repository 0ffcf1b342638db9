'''
.------..------..------..------.
|d.--. ||g.--. ||e.--. ||n.--. |
| :/\: || :/\: || (\/) || :(): |
| (__) || :\/: || :\/: || ()() |
| '--'d|| '--'g|| '--'e|| '--'n|
`------'`------'`------'`------'
'''

import numpy as np
from faker import Faker
from cql import ArrayList, LinkedList
from typing import Any, Dict, Optional

_SHAPES = {
    'list': list,
    'array': ArrayList,
    'linked': LinkedList,
}


class Generator:
    """turns a schema into seeded, reproducible records."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            self._fake.seed_instance(seed)
        self._rng = np.random.default_rng(seed)

    def _resolve_faker_method(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _resolve_provider(self, config: Dict, record: Dict) -> Any:
        provider = config["_qen_provider"]
        if provider == "choice":
            # numpy hands back numpy scalars; records should hold python values
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result

        elif provider == "int":
            return int(self._rng.integers(config["low"], config["high"], endpoint=True))

        elif provider == "ref":
            key = config["key"]
            if key not in record:
                raise ValueError(f"reference to '{key}' not found in current record.")
            return record[key]

        elif provider == "literal":
            if "value" not in config:
                raise ValueError("_qen_provider 'literal' requires a 'value' key.")
            return config["value"]

        raise ValueError(f"unknown _qen_provider: '{provider}'")

    def create(self, schema: Any, record: Optional[Dict] = None) -> Any:
        if isinstance(schema, dict):
            if "_qen_provider" in schema:
                return self._resolve_provider(schema, record or {})
            # fields are built in order so refs can see earlier siblings
            generated = {}
            for k, v in schema.items():
                generated[k] = self.create(v, generated)
            return generated

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int, shape: str = 'list') -> Any:
        """generate `count` records into a container of the requested shape"""
        if shape not in _SHAPES:
            raise ValueError(f"unknown shape '{shape}', expected one of {sorted(_SHAPES)}")
        return _SHAPES[shape](self._generator.create(self._schema) for _ in range(count))


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
