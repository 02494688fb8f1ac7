class UnreferenceableError(TypeError):
    """
    Raised when an object that cannot be weakly referenced (e.g. an `int` or a
    `tuple`) is inserted into a container that only holds it weakly. Such
    objects are rejected outright rather than silently retained strongly.
    """


class BaseTypeError(BaseException):
    """
    A base class for type-related errors that does not derive from `Exception`,
    so that it is not swallowed by the generic `Exception` handler `typing`
    wraps around the assignment of `__orig_class__` to instances of
    parameterized generics. Where possible, `TypeError` should be used instead.
    """


class InvalidItemTypeError(BaseTypeError):
    """
    Raised when a container that already holds items is parameterized (e.g.
    `EnumerableWeakSet[Node]([...])`) and one of those items does not match
    the parameterized type.
    """
