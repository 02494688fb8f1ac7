from collections.abc import MutableSet, Set
from typing import Any, Callable, Generic, Iterable, Iterator, Optional, TypeVar

from enumerable_weakrefs.utils import set_algebra
from enumerable_weakrefs.utils.type_checking import type_label

from .base import EnumerableWeakCollection
from .views import WeakSetView

ItemType = TypeVar("ItemType")


class EnumerableWeakSet(
    Generic[ItemType], EnumerableWeakCollection, MutableSet
):  # pylint: disable=too-many-ancestors
    """
    A set that holds its members weakly, like `weakref.WeakSet`, but which
    remembers the order in which members were added and can be safely
    enumerated while members are being added, removed or reclaimed.

    Members are compared by identity rather than equality, and so need not be
    hashable; they must however support weak references. A member disappears
    from the set once it has been garbage collected.

    Args:
        iterable: An optional iterable of initial members.

    Set operations (`union`, `intersection`, etc.) accept any iterable, while
    the corresponding operators accept only other sets, as for built-in sets.
    Membership in foreign collections is determined by their own `in`
    semantics. Results are new sets of the same type, and operands are never
    modified.
    """

    TYPE_PARAMETERS = ("item",)
    VIEW_TYPE = WeakSetView

    def __init__(self, iterable: Optional[Iterable[ItemType]] = None):
        super().__init__()
        for item in iterable or ():
            self.add(item)

    # MutableSet implementation

    def __contains__(self, item: Any) -> bool:
        record = self._index.lookup(self._identity(item))
        return record is not None and record.referent is item

    def holds(self, item: Any) -> bool:
        """
        Whether `item` itself is a live member of this set. Unlike `in`, this
        never removes dead entries it comes across, whatever the
        `PURGE_ON_READ` policy.
        """
        record = self._index.lookup(self._identity(item), purge=False)
        return record is not None and record.referent is item

    def __iter__(self) -> Iterator[ItemType]:
        for _, item in self._index.records():
            yield item

    def add(self, item: ItemType):
        self._validate(item)
        self._index.insert(self._identity(item), item)

    def discard(self, item: Any):
        self.delete(item)

    def delete(self, item: Any) -> bool:
        return self._index.delete(self._identity(item), referent=item)

    def for_each(self, callback: Callable[[ItemType], Any]):
        """
        Call `callback` with each live member, in insertion order.
        """
        for item in self:
            callback(item)

    def copy(self) -> "EnumerableWeakSet[ItemType]":
        return self._new(self)

    def _entries(self):
        for item in self:
            yield (item,)

    @classmethod
    def _from_iterable(cls, it):
        return cls(it)

    # Set algebra

    def union(self, other: Iterable) -> "EnumerableWeakSet":
        return set_algebra.union(self._new, self, other)

    def intersection(self, other: Iterable) -> "EnumerableWeakSet":
        return set_algebra.intersection(self._new, self, other)

    def difference(self, other: Iterable) -> "EnumerableWeakSet":
        return set_algebra.difference(self._new, self, other)

    def symmetric_difference(self, other: Iterable) -> "EnumerableWeakSet":
        return set_algebra.symmetric_difference(self._new, self, other)

    def issubset(self, other: Iterable) -> bool:
        return set_algebra.issubset(self, other)

    def issuperset(self, other: Iterable) -> bool:
        return set_algebra.issuperset(self, other)

    def isdisjoint(self, other: Iterable) -> bool:
        return set_algebra.isdisjoint(self, other)

    # Operators (the `Set` mixins compare sizes, which may overcount here)

    def __or__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.union(other)

    def __and__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.intersection(other)

    def __sub__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.difference(other)

    def __xor__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.symmetric_difference(other)

    __ror__ = __or__
    __rand__ = __and__
    __rxor__ = __xor__

    def __rsub__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return set_algebra.difference(self._new, other, self)

    def __le__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.issubset(other)

    def __ge__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.issuperset(other)

    def __lt__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.issubset(other) and not self.issuperset(other)

    def __gt__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.issuperset(other) and not self.issubset(other)

    def __eq__(self, other):
        if not isinstance(other, Set):
            return NotImplemented
        return self.issubset(other) and self.issuperset(other)

    __hash__ = None

    def __repr__(self):
        return f"{type_label(self._type)}({{{', '.join(repr(item) for item in self)}}})"
