from ._version import __version__, __version_tuple__
from .collections import (
    EnumerableWeakKeyMap,
    EnumerableWeakSet,
    EnumerableWeakValueMap,
    WeakKeyMapView,
    WeakSetView,
    WeakValueMapView,
)
from .errors import InvalidItemTypeError, UnreferenceableError
from .types import MISSING

__author__ = "Matthew Wardrop"
__author_email__ = "mpwardrop@gmail.com"

__all__ = [
    "__version__",
    "__version_tuple__",
    "__author__",
    "__author_email__",
    "EnumerableWeakSet",
    "EnumerableWeakKeyMap",
    "EnumerableWeakValueMap",
    "WeakSetView",
    "WeakKeyMapView",
    "WeakValueMapView",
    "InvalidItemTypeError",
    "UnreferenceableError",
    "MISSING",
]
