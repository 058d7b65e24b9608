"""Base service class for domain services."""


class Service:
    """Base class for all domain services.

    Services hold the invitation and onboarding rules that span several
    entities (users, clubs, affiliates, verification codes).
    """

    pass
