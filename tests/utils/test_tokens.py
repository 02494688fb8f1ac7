import gc
import re

import pytest

from enumerable_weakrefs.errors import UnreferenceableError
from enumerable_weakrefs.utils.tokens import WeakToken


class Node:
    pass


def test_weak_token():
    fired = []
    node = Node()
    token = WeakToken(node, fired.append, "key")

    assert token() is node
    assert token.key == "key"
    assert token.attached
    assert token.alive
    assert repr(token) == "<WeakToken for 'key' (alive)>"

    token.detach()
    assert not token.attached
    assert repr(token) == "<WeakToken for 'key' (alive, detached)>"

    del node
    gc.collect()
    assert token() is None
    assert not token.alive
    assert fired == [token]
    assert repr(token) == "<WeakToken for 'key' (dead, detached)>"


def test_weak_token_per_insertion():
    node = Node()
    a = WeakToken(node, None, 1)
    b = WeakToken(node, None, 1)
    assert a is not b
    assert a() is b() is node


def test_unreferenceable():
    for obj, label in ((1, "int"), ("a", "str"), ((1, 2), "tuple"), ([], "list")):
        with pytest.raises(
            UnreferenceableError,
            match=re.escape(f"Cannot hold `{label}` instances weakly."),
        ):
            WeakToken(obj, None, "key")

    assert issubclass(UnreferenceableError, TypeError)
