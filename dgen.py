'''
seeded test data for kselect cases.

a schema is a dict of field -> spec, where spec is either a faker provider
name ('word'), a (provider, kwargs) tuple, or a dict carrying '_dgen_provider'
for numpy-backed choices.
'''

import numpy as np
from faker import Faker
from typing import Any, Dict, List, Optional


class Generator:
    """schema interpreter."""

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

    def _resolve_provider(self, config: Dict) -> Any:
        provider = config["_dgen_provider"]
        if provider == "choice":
            # numpy hands back numpy scalars; tests want native values
            choice_result = self._rng.choice(config["from"])
            return choice_result.item() if hasattr(choice_result, 'item') else choice_result
        raise ValueError(f"unknown _dgen_provider: '{provider}'")

    def create(self, schema: Any) -> Any:
        if isinstance(schema, dict):
            if "_dgen_provider" in schema:
                return self._resolve_provider(schema)
            return {k: self.create(v) for k, v in schema.items()}

        if isinstance(schema, str):
            if hasattr(self._fake, schema):
                return self._resolve_faker_method(schema)
            return schema

        if isinstance(schema, tuple) and len(schema) == 2 and isinstance(schema[1], dict):
            return self._resolve_faker_method(schema[0], schema[1])

        return schema

    def integers(self, count: int, low: int, high: int) -> List[int]:
        """count ints drawn from [low, high]; small ranges guarantee duplicates"""
        return self._rng.integers(low, high, size=count, endpoint=True).tolist()


class _SchemaProvider:
    def __init__(self, schema: Any, seed: Optional[int] = None):
        self._schema = schema
        self._generator = Generator(seed)

    def take(self, count: int) -> List[Any]:
        return [self._generator.create(self._schema) for _ in range(count)]


def from_schema(schema: Any, seed: Optional[int] = None) -> _SchemaProvider:
    return _SchemaProvider(schema, seed)


def integers(count: int, low: int, high: int, seed: Optional[int] = None) -> List[int]:
    return Generator(seed).integers(count, low, high)
