from .base import EnumerableWeakCollection
from .mappings import EnumerableWeakKeyMap, EnumerableWeakValueMap
from .sets import EnumerableWeakSet
from .views import WeakKeyMapView, WeakSetView, WeakValueMapView

__all__ = (
    "EnumerableWeakCollection",
    "EnumerableWeakKeyMap",
    "EnumerableWeakSet",
    "EnumerableWeakValueMap",
    "WeakKeyMapView",
    "WeakSetView",
    "WeakValueMapView",
)
