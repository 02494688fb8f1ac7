from abc import ABCMeta, abstractmethod
from typing import Any, Callable, Hashable, Iterator, Tuple, Type

from cached_property import cached_property

from enumerable_weakrefs.errors import InvalidItemTypeError
from enumerable_weakrefs.utils.index import ReclaimableIndex
from enumerable_weakrefs.utils.tokens import WeakToken
from enumerable_weakrefs.utils.type_checking import check_type, type_args, type_label


class EnumerableWeakCollection(metaclass=ABCMeta):
    """
    The behaviour shared by all enumerable weak containers. Each container
    owns a `ReclaimableIndex`, which drops entries once the weakly held object
    behind them is garbage collected, while still allowing live entries to be
    enumerated and counted in insertion order.

    Note that `len()` reports the number of entries held by the index, which
    may include entries whose referent has died but has not yet been
    reclaimed. Iteration and lookups only ever see live entries.

    Class Attributes:
        PURGE_ON_READ: Whether lookups that stumble onto an entry whose
            referent has died remove that entry immediately (the default), or
            leave its removal to the reclamation callback.
        REFERENCE_TYPE: The weak reference type used to hold referents; it is
            called as `REFERENCE_TYPE(referent, callback, key)`.
        REPLACE_LIVE: Whether re-inserting under a key whose referent is
            still alive replaces the weak reference (when the key and the
            referent are distinct objects) or keeps it (when the key *is*
            the referent).
        TYPE_PARAMETERS: Labels for the generic parameters of the container,
            used when validating against a parameterized container type.
        VIEW_TYPE: The read-only view type returned by `.view`.
    """

    PURGE_ON_READ: bool = True
    REFERENCE_TYPE: Type[WeakToken] = WeakToken
    REPLACE_LIVE: bool = False
    TYPE_PARAMETERS: Tuple[str, ...] = ()
    VIEW_TYPE: Type = None

    def __init__(self):
        self._index = ReclaimableIndex(
            self.REFERENCE_TYPE,
            replace_live=self.REPLACE_LIVE,
            purge_on_read=self.PURGE_ON_READ,
        )
        self._type = self.__class__

    def __len__(self) -> int:
        return len(self._index)

    def clear(self):
        """
        Remove all entries. Iterations in progress end early.
        """
        self._index.clear()

    @abstractmethod
    def delete(self, key: Any) -> bool:
        """
        Remove the entry for `key`, returning whether anything was removed.
        """

    @abstractmethod
    def for_each(self, callback: Callable):
        ...  # pragma: no cover

    @abstractmethod
    def _entries(self) -> Iterator[Tuple]:
        """
        Yield the live entries of this collection as tuples matching
        `TYPE_PARAMETERS`.
        """

    def copy(self):
        """
        Return a new collection of the same (parameterized) type with the
        same live entries.
        """
        return self._new(self._entries())

    @cached_property
    def view(self):
        """
        A read-only view of this collection. Views alias this collection, and
        so reflect subsequent mutations rather than a snapshot.
        """
        return self.VIEW_TYPE(self)

    # Helpers

    def _new(self, *args):
        return self._type(*args)

    def _validate(self, *values: Any):
        if not hasattr(self._type, "__args__"):
            return
        for label, value, expected in zip(
            self.TYPE_PARAMETERS,
            values,
            type_args(self._type, len(self.TYPE_PARAMETERS)),
        ):
            if not check_type(value, expected):
                raise TypeError(
                    f"Invalid {label} type. Got: `{repr(value)}`; Expected instance of: `{type_label(expected)}`."
                )

    @staticmethod
    def _identity(obj: Any) -> Hashable:
        return id(obj)

    # Hooks

    @property
    def __orig_class__(self):
        """
        This is set after construction by the `Generic` constructor wrapper if
        there were any type vars set.
        """
        return self._type  # pragma: no cover

    @__orig_class__.setter
    def __orig_class__(self, type_):
        self._type = type_
        for entry in self._entries():
            try:
                self._validate(*entry)
            except TypeError as e:
                raise InvalidItemTypeError(str(e)) from None
