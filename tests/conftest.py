from typing import Any, Callable, Hashable, List

import pytest

from enumerable_weakrefs import (
    EnumerableWeakKeyMap,
    EnumerableWeakSet,
    EnumerableWeakValueMap,
)


class ManualToken:
    """
    A stand-in for `WeakToken` that holds its referent until the test decides
    it has died, and only delivers the reclamation callback when the test
    fires it. This allows deferred (or never delivered) reclamation to be
    simulated deterministically.
    """

    created: List["ManualToken"] = []

    def __init__(self, referent: Any, callback: Callable, key: Hashable):
        self._referent = referent
        self._callback = callback
        self.key = key
        self.attached = True
        self.fired = False
        self.created.append(self)

    def __call__(self):
        return self._referent

    def detach(self):
        self.attached = False

    def kill(self):
        self._referent = None

    def fire(self):
        assert not self.fired, "Reclamation callbacks fire at most once."
        self.fired = True
        self._callback(self)

    def reclaim(self):
        self.kill()
        self.fire()

    @classmethod
    def latest(cls, key: Hashable) -> "ManualToken":
        return [token for token in cls.created if token.key == key][-1]


@pytest.fixture
def tokens():
    class Tokens(ManualToken):
        created = []

    return Tokens


@pytest.fixture
def manual_set_cls(tokens):
    class ManualWeakSet(EnumerableWeakSet):
        REFERENCE_TYPE = tokens

    return ManualWeakSet


@pytest.fixture
def manual_key_map_cls(tokens):
    class ManualWeakKeyMap(EnumerableWeakKeyMap):
        REFERENCE_TYPE = tokens

    return ManualWeakKeyMap


@pytest.fixture
def manual_value_map_cls(tokens):
    class ManualWeakValueMap(EnumerableWeakValueMap):
        REFERENCE_TYPE = tokens

    return ManualWeakValueMap
