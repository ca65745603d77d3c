from __future__ import annotations

from collections.abc import Hashable, Iterator, MutableMapping, MutableSet
from typing import Generic, TypeVar

from sortedcontainers import SortedDict, SortedSet

KeyType = TypeVar("KeyType", bound=Hashable)
ValueType = TypeVar("ValueType", bound=Hashable)


class MapToSetMixin(Generic[KeyType, ValueType]):
    """
    Sub-operations for a mapping whose values are sets.

    A key is created together with its first value and deleted together with its last one,
    so no key ever maps to an empty set.
    """

    def _new_set(self, value: ValueType) -> MutableSet[ValueType]:
        raise NotImplementedError()

    def _mapping(self) -> MutableMapping[KeyType, MutableSet[ValueType]]:
        return self  # type: ignore[return-value]

    def sub_insert(self, key: KeyType, value: ValueType) -> bool:
        mapping = self._mapping()
        values = mapping.get(key)
        if values is None:
            mapping[key] = self._new_set(value)
            return True
        if value in values:
            return False
        values.add(value)
        return True

    def sub_remove(self, key: KeyType, value: ValueType) -> bool:
        mapping = self._mapping()
        values = mapping.get(key)
        if values is None or value not in values:
            return False
        values.remove(value)
        if not values:
            del mapping[key]
        return True

    def sub_contains(self, key: KeyType, value: ValueType) -> bool:
        values = self._mapping().get(key)
        return values is not None and value in values

    def iter_values(self, key: KeyType) -> Iterator[ValueType]:
        yield from self._mapping().get(key, ())

    def count_values(self, key: KeyType) -> int:
        return len(self._mapping().get(key, ()))

    @property
    def values_count(self) -> int:
        return sum(len(values) for values in self._mapping().values())


class SortedDictToSet(MapToSetMixin[KeyType, ValueType], SortedDict):
    """Keys and the values under each key iterate in their natural order."""

    def _new_set(self, value: ValueType) -> SortedSet:
        return SortedSet((value,))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict(self.items())!r})"


class DictToSet(MapToSetMixin[KeyType, ValueType], dict):
    def _new_set(self, value: ValueType) -> set[ValueType]:
        return {value}

    def __repr__(self) -> str:
        return f"{type(self).__name__}({dict.__repr__(self)})"

    def copy(self) -> DictToSet[KeyType, ValueType]:
        return type(self)(self)
