from collections.abc import ItemsView, Mapping, MutableMapping, ValuesView
from typing import (
    Any,
    Callable,
    Generic,
    Iterable,
    Iterator,
    Optional,
    Tuple,
    TypeVar,
    Union,
)

from enumerable_weakrefs.utils.type_checking import type_label

from .base import EnumerableWeakCollection
from .views import WeakKeyMapView, WeakValueMapView

KeyType = TypeVar("KeyType")
ValueType = TypeVar("ValueType")


class LiveValuesView(ValuesView):
    """
    A values view that walks the live entries of a weak mapping directly,
    rather than looking each key up again after it has been yielded.
    """

    def __iter__(self):
        for _, value in self._mapping._entries():  # pylint: disable=protected-access
            yield value


class LiveItemsView(ItemsView):
    """
    An items view that walks the live entries of a weak mapping directly.
    """

    def __iter__(self):
        yield from self._mapping._entries()  # pylint: disable=protected-access


class EnumerableWeakMapping(EnumerableWeakCollection, MutableMapping):
    """
    The parts of the `MutableMapping` protocol shared by the weak-key and
    weak-value maps. See `EnumerableWeakKeyMap` and `EnumerableWeakValueMap`.
    """

    TYPE_PARAMETERS = ("key", "value")

    def __init__(
        self,
        iterable: Optional[Union[Mapping, Iterable[Tuple[Any, Any]]]] = None,
    ):
        super().__init__()
        if iterable is not None:
            self.update(iterable)

    def __iter__(self) -> Iterator:
        for key, _ in self._entries():
            yield key

    def __delitem__(self, key):
        if not self.delete(key):
            raise KeyError(key)

    def values(self):
        return LiveValuesView(self)

    def items(self):
        return LiveItemsView(self)

    def for_each(self, callback: Callable[[Any, Any], Any]):
        """
        Call `callback(key, value)` for each live entry, in insertion order.
        """
        for key, value in self._entries():
            callback(key, value)

    def __eq__(self, other):
        # Keys need not be hashable, so entries are compared by lookup rather
        # than by building dictionaries.
        if not isinstance(other, Mapping):
            return NotImplemented
        for key, value in self._entries():
            if key not in other:
                return False
            other_value = other[key]
            if not (other_value is value or other_value == value):
                return False
        return all(key in self for key in other)

    __hash__ = None

    def __repr__(self):
        items = ", ".join(f"{key!r}: {value!r}" for key, value in self._entries())
        return f"{type_label(self._type)}({{{items}}})"


class EnumerableWeakKeyMap(
    Generic[KeyType, ValueType], EnumerableWeakMapping
):  # pylint: disable=too-many-ancestors
    """
    A mapping whose keys are held weakly, like `weakref.WeakKeyDictionary`,
    but which preserves insertion order and can be enumerated while entries
    are added, removed or reclaimed. An entry disappears once its key is
    garbage collected, regardless of whether its value is still reachable
    elsewhere.

    Keys are compared by identity rather than equality, and so need not be
    hashable; they must however support weak references. Values are held
    strongly.

    Args:
        iterable: An optional mapping, or iterable of `(key, value)` pairs, to
            populate the new map with. Later pairs override earlier ones for
            the same key.
    """

    VIEW_TYPE = WeakKeyMapView

    def __getitem__(self, key: KeyType) -> ValueType:
        record = self._index.lookup(self._identity(key))
        if record is None or record.referent is not key:
            raise KeyError(key)
        return record.value

    def __setitem__(self, key: KeyType, value: ValueType):
        self._validate(key, value)
        self._index.insert(self._identity(key), key, value)

    def __contains__(self, key: Any) -> bool:
        record = self._index.lookup(self._identity(key))
        return record is not None and record.referent is key

    def delete(self, key: Any) -> bool:
        return self._index.delete(self._identity(key), referent=key)

    def _entries(self):
        for record, key in self._index.records():
            yield key, record.value


class EnumerableWeakValueMap(
    Generic[KeyType, ValueType], EnumerableWeakMapping
):  # pylint: disable=too-many-ancestors
    """
    A mapping whose values are held weakly, like
    `weakref.WeakValueDictionary`, but which preserves insertion order and can
    be enumerated while entries are added, removed or reclaimed. An entry
    disappears once its value is garbage collected.

    Keys are held strongly and compared as in a `dict`; values must support
    weak references. Assigning a new value to an existing key keeps the key's
    position, and a stale reclamation of the previous value never removes the
    new one.

    Args:
        iterable: An optional mapping, or iterable of `(key, value)` pairs, to
            populate the new map with. Later pairs override earlier ones for
            the same key.
    """

    REPLACE_LIVE = True
    VIEW_TYPE = WeakValueMapView

    def __getitem__(self, key: KeyType) -> ValueType:
        record = self._index.lookup(key)
        value = None if record is None else record.referent
        if value is None:
            raise KeyError(key)
        return value

    def __setitem__(self, key: KeyType, value: ValueType):
        self._validate(key, value)
        self._index.insert(key, value)

    def __contains__(self, key: Any) -> bool:
        return self._index.lookup(key) is not None

    def delete(self, key: Any) -> bool:
        return self._index.delete(key)

    def _entries(self):
        for record, value in self._index.records():
            yield record.key, value
