import weakref
from contextlib import contextmanager
from typing import (
    Any,
    Callable,
    Dict,
    Hashable,
    Iterator,
    List,
    Optional,
    Tuple,
    Type,
)

from enumerable_weakrefs.types import MISSING

from .chain import Record, RecordChain
from .tokens import WeakToken


class ReclaimableIndex:
    """
    The bookkeeping shared by all enumerable weak containers: a strong index
    from keys to records, an insertion-ordered chain of the same records for
    enumeration, and one reclamation registration (the token's weakref
    callback) per record.

    Three facts can change independently and out of order: whether a referent
    is still alive, whether its reclamation callback has fired, and whether
    its key has been re-used for a newer referent. The index reconciles them
    as follows:
    - reads treat a dead token as absent, whether or not its callback has
      fired yet;
    - every token the index stops pointing at is detached, so its eventual
      callback is inert;
    - a callback only removes the entry for its key if that entry still holds
      the very token that fired.

    Callbacks that arrive while an index operation is running (the garbage
    collector may run on any allocation) are queued and applied once the
    operation completes, so the index and chain are always mutually
    consistent when observed.

    Args:
        reference_type: The token factory, called as
            `reference_type(referent, callback, key)`.
        replace_live: Whether inserting under a key whose referent is still
            alive swaps in a new token (weak-value maps, where the key is
            strong and the referent changes) or keeps the existing token
            (sets and weak-key maps, where the key *is* the referent).
        purge_on_read: Whether a lookup that finds a dead token removes its
            entry immediately (`True`) or leaves it for the reclamation
            callback (`False`).
    """

    def __init__(
        self,
        reference_type: Type[WeakToken] = WeakToken,
        *,
        replace_live: bool = False,
        purge_on_read: bool = True,
    ):
        self.reference_type = reference_type
        self.replace_live = replace_live
        self.purge_on_read = purge_on_read

        self._index: Dict[Hashable, Record] = {}
        self._chain = RecordChain()
        self._busy = False
        self._pending: List[WeakToken] = []

        def reclaim(token, selfref=weakref.ref(self)):
            self = selfref()
            if self is not None:
                self._on_reclaim(token)

        self._reclaim: Callable[[WeakToken], None] = reclaim

    # Reclamation protocol

    def _on_reclaim(self, token: WeakToken):
        if self._busy:
            self._pending.append(token)
            return
        with self._exclusive():
            self._expire(token)

    def _expire(self, token: WeakToken):
        if not token.attached:
            return
        record = self._index.get(token.key)
        if record is None or record.token is not token:
            return
        self._remove(record)

    @contextmanager
    def _exclusive(self):
        if self._busy:  # Re-entrant use from within the same operation.
            yield
            return
        self._busy = True
        try:
            yield
        finally:
            try:
                while self._pending:
                    self._expire(self._pending.pop(0))
            finally:
                self._busy = False

    def _remove(self, record: Record):
        record.token.detach()
        del self._index[record.key]
        self._chain.unlink(record)

    # Index operations

    def insert(self, key: Hashable, referent: Any, value: Any = None) -> Record:
        """
        File `referent` (and the associated `value`) under `key`, returning
        the record now held for `key`.

        If `key` already maps to a live referent the record keeps its place in
        the enumeration order; if its referent has died the stale record is
        discarded and the insertion is treated as new.
        """
        with self._exclusive():
            record = self._index.get(key)
            live = record is not None and record.token() is not None

            if not live:
                # Tokens are created first so that unreferenceable referents
                # are rejected before anything is modified.
                token = self._new_token(referent, key)
                if record is not None:
                    self._remove(record)
                record = Record(key, token, value)
                self._index[key] = record
                self._chain.append(record)
                return record

            if self.replace_live and record.token() is not referent:
                token = self._new_token(referent, key)
                record.token.detach()
                record.token = token
            record.value = value
            return record

    def lookup(
        self, key: Hashable, purge: Optional[bool] = None
    ) -> Optional[Record]:
        """
        Return the record filed under `key` if its referent is still alive,
        and `None` otherwise.

        Args:
            key: The key to look up.
            purge: Whether to remove the entry if its referent has died.
                Defaults to the `purge_on_read` policy of this index.
        """
        if purge is None:
            purge = self.purge_on_read
        record = self._index.get(key)
        if record is None:
            return None
        if record.token() is None:
            if purge:
                with self._exclusive():
                    if self._index.get(key) is record:
                        self._remove(record)
            return None
        return record

    def delete(self, key: Hashable, referent: Any = MISSING) -> bool:
        """
        Remove the entry for `key`, returning whether there was one. Entries
        whose referent has died (but which have not yet been reclaimed) count
        as present, unless `referent` is passed, in which case only an entry
        whose referent *is* `referent` is removed.
        """
        with self._exclusive():
            record = self._index.get(key)
            if record is None:
                return False
            if referent is not MISSING and record.token() is not referent:
                return False
            self._remove(record)
            return True

    def clear(self):
        with self._exclusive():
            for record in self._chain.clear():
                record.token.detach()
            self._index = {}
            # Reclamations already queued refer to detached tokens.
            self._pending.clear()

    def records(self) -> Iterator[Tuple[Record, Any]]:
        """
        Lazily walk the records in insertion order, yielding `(record,
        referent)` for those whose referent is still alive. The referent is
        held strongly while it is yielded. Each call starts a fresh walk.
        """
        for record in self._chain:
            referent = record.token()
            if referent is not None:
                yield record, referent

    def __contains__(self, key: Hashable) -> bool:
        return self.lookup(key) is not None

    def __len__(self) -> int:
        return len(self._index)

    # Helpers

    def _new_token(self, referent: Any, key: Hashable) -> WeakToken:
        return self.reference_type(referent, self._reclaim, key)
