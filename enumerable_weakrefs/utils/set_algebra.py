"""
Pure set operations between enumerable weak sets and other collections.

All operations are defined purely in terms of membership tests and iteration
of live members, and never mutate their operands (membership checks against
enumerable weak sets never purge dead entries). Operands may be enumerable weak
sets (or views of them), any collection providing `__contains__`,
`__iter__` and `__len__`, or a bare iterable (which is consumed once into an
identity-keyed snapshot).

Membership in an operand is decided by its own rule: identity for enumerable
weak sets and snapshots, and `in` for anything else. Each item of the left
operand is therefore always judged by the right operand, and vice versa.
Sizes are only used to choose the operand to iterate when both operands
compare by identity, where the choice cannot change the result; an
inaccurate size then costs time rather than correctness.
"""

from typing import Any, Callable, Iterable, Iterator

from typing_extensions import Protocol, runtime_checkable


@runtime_checkable
class SetLike(Protocol):
    """
    The read-only surface required of a set-algebra operand.
    """

    def __contains__(self, item: Any) -> bool:
        ...  # pragma: no cover

    def __iter__(self) -> Iterator:
        ...  # pragma: no cover

    def __len__(self) -> int:
        ...  # pragma: no cover


@runtime_checkable
class IdentitySetLike(SetLike, Protocol):
    """
    A set-algebra operand whose membership is decided by identity, and which
    can be queried without side effects through `holds`.
    """

    def holds(self, item: Any) -> bool:
        ...  # pragma: no cover


class IdentitySnapshot:
    """
    A frozen, identity-keyed copy of a bare iterable, so that it can be
    consulted more than once and does not require hashable items.
    """

    __slots__ = ("_items",)

    def __init__(self, iterable: Iterable):
        self._items = {id(item): item for item in iterable}

    def __contains__(self, item):
        return self._items.get(id(item), self) is item

    holds = __contains__

    def __iter__(self):
        return iter(list(self._items.values()))

    def __len__(self):
        return len(self._items)


def as_operand(other: Any) -> SetLike:
    if isinstance(other, SetLike):
        return other
    if isinstance(other, Iterable):
        return IdentitySnapshot(other)
    raise TypeError(
        f"Set operations require an iterable operand, not `{type(other).__name__}`."
    )


def contains(collection: SetLike, item: Any) -> bool:
    """
    Membership test that treats items a collection cannot even look up (e.g.
    unhashable items against a built-in `set`) as absent. Identity-keyed
    operands are queried through `holds`, which never purges them.
    """
    if isinstance(collection, IdentitySetLike):
        return collection.holds(item)
    try:
        return item in collection
    except TypeError:
        return False


def smaller_first(left: SetLike, right: SetLike):
    """
    Order two operands so that the one reporting the smaller size comes first.
    Operands are only swapped when both compare by identity; otherwise `left`
    is iterated and `right` looked up, whatever their sizes.
    """
    if not (
        isinstance(left, IdentitySetLike) and isinstance(right, IdentitySetLike)
    ):
        return left, right
    if len(right) < len(left):
        return right, left
    return left, right


# Operations returning new sets


def union(factory: Callable, left: SetLike, right: Any):
    right = as_operand(right)
    result = factory()
    for item in left:
        result.add(item)
    for item in right:
        result.add(item)
    return result


def intersection(factory: Callable, left: SetLike, right: Any):
    right = as_operand(right)
    iterated, looked_up = smaller_first(left, right)
    result = factory()
    for item in iterated:
        if contains(looked_up, item):
            result.add(item)
    return result


def difference(factory: Callable, left: SetLike, right: Any):
    right = as_operand(right)
    result = factory()
    for item in left:
        if not contains(right, item):
            result.add(item)
    return result


def symmetric_difference(factory: Callable, left: SetLike, right: Any):
    right = as_operand(right)
    result = factory()
    for item in left:
        if not contains(right, item):
            result.add(item)
    for item in right:
        if not contains(left, item):
            result.add(item)
    return result


# Predicates


def issubset(left: SetLike, right: Any) -> bool:
    right = as_operand(right)
    return all(contains(right, item) for item in left)


def issuperset(left: SetLike, right: Any) -> bool:
    right = as_operand(right)
    return all(contains(left, item) for item in right)


def isdisjoint(left: SetLike, right: Any) -> bool:
    right = as_operand(right)
    iterated, looked_up = smaller_first(left, right)
    return not any(contains(looked_up, item) for item in iterated)
