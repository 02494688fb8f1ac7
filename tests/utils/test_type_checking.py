from typing import Any, List, Optional, TypeVar, Union

from typing_extensions import Literal

from enumerable_weakrefs import EnumerableWeakSet
from enumerable_weakrefs.utils.type_checking import check_type, type_args, type_label


class Node:
    pass


class TestTypeChecking:
    def test_check_type(self):
        assert check_type(Node(), Node)
        assert not check_type(Node(), str)
        assert check_type(Node(), Any)
        assert check_type(Node(), TypeVar("T"))

        assert check_type(Node(), Union[str, Node])
        assert not check_type(1, Union[str, Node])
        assert check_type(None, Optional[Node])

        # Only the outer type of generics is checked.
        assert check_type([1, "a"], List[str])
        assert not check_type((), List[str])

        assert check_type("a", Literal["a", "b"])
        assert not check_type("c", Literal["a", "b"])

    def test_type_args(self):
        assert type_args(EnumerableWeakSet[Node], 1) == (Node,)
        assert type_args(EnumerableWeakSet, 1) == (Any,)
        assert type_args(EnumerableWeakSet[Node], 2) == (Any, Any)

    def test_type_label(self):
        assert type_label(Node) == "Node"
        assert type_label(type(None)) == "None"
        assert type_label(Union[str, Node]) == "str | Node"
        assert type_label(EnumerableWeakSet[Node]) == "EnumerableWeakSet[Node]"
        assert type_label(EnumerableWeakSet) == "EnumerableWeakSet"
        assert type_label(List[str]) == "list[str]"
        assert type_label(Node()) == "Node"
        assert type_label(EnumerableWeakSet[Node]()) == "EnumerableWeakSet[Node]"
        assert type_label(Literal["a"]) == "Literal['a']"
