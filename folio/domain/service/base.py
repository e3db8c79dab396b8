"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that don't belong to a single entry, such as
    visibility against the clock or slug uniqueness within a kind.
    """

    pass
