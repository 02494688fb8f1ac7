from typing import Any, Hashable, Iterator, Optional

from .tokens import WeakToken


class Record:
    """
    One entry of an index: the key it is filed under, the token for its weakly
    held referent, and (for weak-key maps) the strongly held associated value.

    Records are also the links of the `RecordChain` that preserves insertion
    order. An unlinked record keeps its `next` pointer so that an iteration
    parked on it can still find its way back into the chain.
    """

    __slots__ = ("key", "token", "value", "prev", "next", "linked")

    def __init__(self, key: Hashable, token: WeakToken, value: Any = None):
        self.key = key
        self.token = token
        self.value = value
        self.prev: Optional["Record"] = None
        self.next: Optional["Record"] = None
        self.linked = False

    @property
    def referent(self) -> Any:
        return self.token()

    def __repr__(self):
        return f"<Record {self.key!r}: {self.token!r}>"  # pragma: no cover


class RecordChain:
    """
    An insertion-ordered, doubly linked chain of records that tolerates being
    mutated while it is being walked.

    Iteration semantics mirror those of a live ordered container:
    - records unlinked before the walk reaches them are skipped;
    - records appended during the walk are visited if the walk has not yet
      run off the end of the chain;
    - `clear()` ends every walk in progress.
    """

    def __init__(self):
        self.head: Optional[Record] = None
        self.tail: Optional[Record] = None
        self.epoch = 0

    def append(self, record: Record):
        record.prev = self.tail
        record.next = None
        record.linked = True
        if self.tail is None:
            self.head = record
        else:
            self.tail.next = record
        self.tail = record

    def unlink(self, record: Record):
        if not record.linked:
            return
        record.linked = False
        if record.prev is None:
            self.head = record.next
        else:
            record.prev.next = record.next
        if record.next is None:
            self.tail = record.prev
        else:
            record.next.prev = record.prev
        # `record.next` is left in place for walks parked on this record.
        record.prev = None

    def clear(self) -> Iterator[Record]:
        """
        Unlink every record and end all walks in progress, returning the
        records that were linked (in order) so the caller can release them.
        """
        records = []
        record = self.head
        while record is not None:
            records.append(record)
            record.linked = False
            record = record.next
        self.head = self.tail = None
        self.epoch += 1
        return iter(records)

    def __iter__(self) -> Iterator[Record]:
        epoch = self.epoch
        record = self.head
        while record is not None and self.epoch == epoch:
            if record.linked:
                yield record
            record = record.next

    def __bool__(self):
        return self.head is not None
