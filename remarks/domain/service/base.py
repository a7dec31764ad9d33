"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the comment rules that don't belong to a single
    entity: caching, threading, rate limiting and input cleaning.
    """

    pass
