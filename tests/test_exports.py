import enumerable_weakrefs
from enumerable_weakrefs import __all__ as exported


def test_exports():
    assert set(exported) == {
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
    }
    for name in exported:
        assert hasattr(enumerable_weakrefs, name)


def test_version():
    assert enumerable_weakrefs.__version__ == ".".join(
        str(part) for part in enumerable_weakrefs.__version_tuple__
    )
