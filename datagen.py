'''
test data for lazinq: records generated from a small schema language.

    schema = {
        'id': {'_provider': 'sequence'},
        'name': 'word',                                   # faker provider
        'age': ('pyint', {'min_value': 18, 'max_value': 65}),
        'team': {'_provider': 'choice', 'from': ['a', 'b']},
        'rank': {'_provider': 'nullable', 'of': ('pyint', {}), 'rate': 0.2},
    }
    people = from_schema(schema, seed=7).take(50)    # -> Enumerable[dict]
'''

import numpy as np
from faker import Faker
from lazinq import from_iterable, Enumerable
from typing import Any, Dict, Optional


class Generator:
    """schema interpreter."""

    def __init__(self, seed: Optional[int] = None):
        self._fake = Faker()
        if seed is not None:
            Faker.seed(seed)
        self._rng = np.random.default_rng(seed)
        self._sequences: Dict[int, int] = {}

    def _faker(self, method_name: str, kwargs: Optional[Dict] = None) -> Any:
        try:
            method = getattr(self._fake, method_name)
        except AttributeError:
            raise ValueError(f"faker has no provider '{method_name}'")
        return method(**(kwargs or {}))

    def _provider(self, config: Dict) -> Any:
        provider = config['_provider']

        if provider == 'choice':
            # index into the options so mixed types and none survive untouched
            options = config['from']
            return options[int(self._rng.integers(len(options)))]

        if provider == 'nullable':
            if self._rng.random() < config.get('rate', 0.25):
                return None
            return self.create(config['of'])

        if provider == 'sequence':
            key = id(config)
            self._sequences[key] = self._sequences.get(key, config.get('start', 1) - 1) + 1
            return self._sequences[key]

        if provider == 'literal':
            if 'value' not in config:
                raise ValueError("_provider 'literal' requires a 'value' key.")
            return config['value']

        raise ValueError(f"unknown _provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if '_provider' in schema:
                return self._provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._faker(schema)
            return schema  # otherwise, it's a literal string.

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._faker(schema[0], schema[1])

        return schema


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> Enumerable:
        # generated once, so every enumeration of the result sees the same records
        return from_iterable([self._generator.create(self._schema) for _ in range(count)])


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)
