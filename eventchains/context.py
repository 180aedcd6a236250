"""
EventContext - Shared data container that flows through the event chain.
"""

# Reserved key holding the display name of the event currently running.
CURRENT_EVENT_KEY = '_current_event'

_MISSING = object()


class EventContext:
    """
    Mutable key/value store shared by every event and middleware of one run.

    The chain passes the same instance to each layer, so writes made by one
    event are visible to the next without copying. The chain clears it once
    the run is over.

    Lookups are relaxed: asking for a value as the wrong type yields the
    default, exactly as if the key had never been set.
    """

    def __init__(self, data=None):
        """
        Initialize the EventContext with optional initial data.

        Args:
            data: Mapping of initial context data (optional). It is copied,
                so clearing the context leaves the caller's mapping intact.
        """
        self._data = dict(data) if data is not None else {}

    def get(self, key, default=None, expected_type=None):
        """
        Get a value from the context.

        Args:
            key: The key to retrieve
            default: Value returned when the key is missing or mistyped
            expected_type: Type (or tuple of types) the value must be an
                instance of. A mismatch is treated as absent.

        Returns:
            The stored value, or ``default``
        """
        value = self._data.get(key, _MISSING)
        if value is _MISSING:
            return default
        if expected_type is not None and not _is_instance(value, expected_type):
            return default
        return value

    def set(self, key, value):
        """
        Set a value in the context.

        Returns:
            self (for method chaining)
        """
        self._data[key] = value
        return self

    def has(self, key):
        """Return True if ``key`` has been set."""
        return key in self._data

    def remove(self, key):
        """Remove ``key`` if present. Returns self."""
        self._data.pop(key, None)
        return self

    def clear(self):
        """Clear all data from the context."""
        self._data.clear()
        return self

    @property
    def count(self):
        """Number of entries currently stored."""
        return len(self._data)

    def keys(self):
        return self._data.keys()

    def items(self):
        return self._data.items()

    def to_dict(self):
        """Return a shallow copy of the stored data."""
        return self._data.copy()

    def __len__(self):
        return len(self._data)

    def __contains__(self, key):
        return key in self._data

    def __repr__(self):
        return f"EventContext({self._data})"

    def __str__(self):
        return str(self._data)


def _is_instance(value, expected_type):
    # bool subclasses int, but a flag is not a number here.
    if isinstance(value, bool):
        types = expected_type if isinstance(expected_type, tuple) else (expected_type,)
        return bool in types or object in types
    return isinstance(value, expected_type)
