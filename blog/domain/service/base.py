"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Domain services hold the rules of the comment engine: pagination,
    lifecycle checks and the interaction state machines. They receive the
    acting user explicitly; there is no ambient current user.
    """

    pass
