import weakref
from typing import Any, Callable, Hashable

from enumerable_weakrefs.errors import UnreferenceableError
from enumerable_weakrefs.utils.type_checking import type_label


class WeakToken(weakref.ref):
    """
    A weak reference to a referent that also remembers the index key it was
    inserted under, and whether it is still attached to that index.

    A token stands for exactly one insertion event. Calling it returns the
    referent, or `None` once the referent has been reclaimed; a dead token
    never comes back to life. The reclamation callback receives the token
    itself, so the `key` travels with it as matching context.

    Tokens are detached (rather than unregistered, which `weakref` does not
    support) whenever the index stops pointing at them. A detached token's
    callback may still fire later, and must then be ignored.

    Args:
        referent: The object to reference weakly.
        callback: Called with this token when the referent is reclaimed.
        key: The index key this token was created for.
    """

    __slots__ = ("key", "attached")

    def __new__(cls, referent: Any, callback: Callable, key: Hashable):
        try:
            self = super().__new__(cls, referent, callback)
        except TypeError:
            raise UnreferenceableError(
                f"Cannot hold `{type_label(type(referent))}` instances weakly."
            ) from None
        self.key = key
        self.attached = True
        return self

    def __init__(
        self, referent: Any, callback: Callable, key: Hashable
    ):  # pylint: disable=unused-argument
        super().__init__(referent, callback)

    @property
    def alive(self) -> bool:
        return self() is not None

    def detach(self):
        self.attached = False

    def __repr__(self):
        state = "alive" if self.alive else "dead"
        if not self.attached:
            state += ", detached"
        return f"<{self.__class__.__name__} for {self.key!r} ({state})>"
