"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules that span a repository call sequence,
    such as find-then-mutate-then-persist.
    """

    pass
