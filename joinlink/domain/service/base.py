"""Base class for domain services."""


class Service:
    """Marker base for domain services.

    Services own the invitation rules and reach I/O only through the
    store, probe and notifier abstractions they are constructed with.
    """

    pass
