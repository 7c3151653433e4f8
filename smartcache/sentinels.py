"""Marker object for cache misses."""


class _Missing:
    """Type of the ``MISS`` singleton."""

    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "MISS"

    def __reduce__(self):
        return (_Missing, ())


# Returned by get/remove when the key is absent or expired, and by a policy
# when it has nothing to evict. Compare with ``is``.
MISS = _Missing()
