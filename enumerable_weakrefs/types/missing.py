# Sentinels for unset arguments and absent entries


class _SentinelType(type):
    """
    Metaclass for singleton, falsey sentinel classes. Calling a sentinel
    returns the sentinel itself, so `MISSING()` is `MISSING`.
    """

    def __repr__(cls):
        return cls.__name__

    def __bool__(cls):
        return False

    def __call__(cls):
        return cls


class MISSING(metaclass=_SentinelType):
    """
    Used as the default of optional arguments where `None` is a legitimate
    value (e.g. the default passed to `.pop()`).
    """
