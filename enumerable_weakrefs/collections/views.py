from collections.abc import Mapping, Set
from typing import Any, Callable, Iterable


class CollectionView:
    """
    A read-only window onto an enumerable weak collection. Views alias the
    collection they were created from (they are not snapshots), and expose
    every operation except those that mutate it.

    Args:
        collection: The collection to view.
    """

    __slots__ = ("_collection",)

    def __init__(self, collection):
        self._collection = collection

    def __len__(self) -> int:
        return len(self._collection)

    def __iter__(self):
        return iter(self._collection)

    def __contains__(self, item: Any) -> bool:
        return item in self._collection

    def __eq__(self, other):
        if isinstance(other, CollectionView):
            other = other._collection
        return self._collection == other

    __hash__ = None

    def for_each(self, callback: Callable):
        self._collection.for_each(callback)

    def copy(self):
        """
        Return a new (mutable) collection holding the live entries of the
        viewed collection.
        """
        return self._collection.copy()

    def __repr__(self):
        return f"{self.__class__.__name__}({self._collection!r})"


class WeakSetView(CollectionView, Set):
    """
    A read-only view of an `EnumerableWeakSet`. Set operations return new
    `EnumerableWeakSet` instances.
    """

    __slots__ = ()

    def holds(self, item: Any) -> bool:
        return self._collection.holds(item)

    def union(self, other: Iterable):
        return self._collection.union(other)

    def intersection(self, other: Iterable):
        return self._collection.intersection(other)

    def difference(self, other: Iterable):
        return self._collection.difference(other)

    def symmetric_difference(self, other: Iterable):
        return self._collection.symmetric_difference(other)

    def issubset(self, other: Iterable) -> bool:
        return self._collection.issubset(other)

    def issuperset(self, other: Iterable) -> bool:
        return self._collection.issuperset(other)

    def isdisjoint(self, other: Iterable) -> bool:
        return self._collection.isdisjoint(other)

    def __or__(self, other):
        return self._collection.__or__(other)

    def __and__(self, other):
        return self._collection.__and__(other)

    def __sub__(self, other):
        return self._collection.__sub__(other)

    def __xor__(self, other):
        return self._collection.__xor__(other)

    def __rsub__(self, other):
        return self._collection.__rsub__(other)

    __ror__ = __or__
    __rand__ = __and__
    __rxor__ = __xor__

    def __le__(self, other):
        return self._collection.__le__(other)

    def __lt__(self, other):
        return self._collection.__lt__(other)

    def __ge__(self, other):
        return self._collection.__ge__(other)

    def __gt__(self, other):
        return self._collection.__gt__(other)


class WeakMappingView(CollectionView, Mapping):
    """
    A read-only view of an `EnumerableWeakKeyMap` or `EnumerableWeakValueMap`.
    """

    __slots__ = ()

    def __getitem__(self, key):
        return self._collection[key]

    def keys(self):
        return self._collection.keys()

    def values(self):
        return self._collection.values()

    def items(self):
        return self._collection.items()


class WeakKeyMapView(WeakMappingView):
    """
    A read-only view of an `EnumerableWeakKeyMap`.
    """

    __slots__ = ()


class WeakValueMapView(WeakMappingView):
    """
    A read-only view of an `EnumerableWeakValueMap`.
    """

    __slots__ = ()
