import inspect
import sys
import types
from typing import Any, Tuple, Type, TypeVar, Union

# pylint: disable=protected-access
from typing_extensions import Literal as LiteralExtension

try:
    from typing import Literal
except ImportError:  # pragma: no cover
    from typing_extensions import Literal  # pylint: disable=reimported


def check_type(value: Any, attr_type: Type) -> bool:
    """
    Check whether `value` is an acceptable instance of `attr_type`. Only the
    outer type of parameterized generics is checked, since checking the
    contents of a weakly held container would require keeping it alive.
    """
    if attr_type is Any or isinstance(attr_type, TypeVar):
        return True

    if sys.version_info >= (3, 10) and isinstance(attr_type, types.UnionType):
        return any(check_type(value, type_) for type_ in attr_type.__args__)

    if hasattr(attr_type, "__origin__"):  # we are dealing with a `typing` object.
        if attr_type.__origin__ is Union:
            return any(check_type(value, type_) for type_ in attr_type.__args__)
        if attr_type.__origin__ in (Literal, LiteralExtension):
            return value in attr_type.__args__
        return isinstance(value, attr_type.__origin__)

    return isinstance(value, attr_type)


def type_args(type_: Type, count: int) -> Tuple[Type, ...]:
    """
    Extract the parameters of a subscripted container type (e.g. the `Node`
    in `EnumerableWeakSet[Node]`), padding with `Any` when `type_` was not
    subscripted.
    """
    args = getattr(type_, "__args__", None) or ()
    if len(args) != count:
        return (Any,) * count
    return tuple(args)


def type_label(attr_type: Type) -> str:
    """
    Generate a short human-readable label for `attr_type` for use in error
    messages and reprs.
    """
    if attr_type is type(None):
        return "None"
    if (
        sys.version_info >= (3, 10)
        and isinstance(attr_type, types.UnionType)
        or getattr(attr_type, "__origin__", None) is Union
    ):
        return " | ".join(type_label(arg) for arg in attr_type.__args__)
    if hasattr(attr_type, "__origin__"):  # Generics
        if str(attr_type.__origin__).rsplit(".", 1)[-1] == "Literal":
            return f"Literal[{', '.join(repr(arg) for arg in attr_type.__args__)}]"
        label = type_label(attr_type.__origin__)
        if hasattr(attr_type, "__args__") and not any(
            isinstance(arg, TypeVar) for arg in attr_type.__args__
        ):
            return (
                f"{label}[{', '.join(type_label(arg) for arg in attr_type.__args__)}]"
            )
        return label
    if str(attr_type).startswith("typing."):
        return str(attr_type).replace("typing.", "", 1)
    if not inspect.isclass(attr_type):
        if hasattr(attr_type, "__orig_class__"):
            return type_label(attr_type.__orig_class__)
        return type_label(type(attr_type))
    return attr_type.__name__
