"""Custom Dishka scopes for tenantguard."""

from dishka import BaseScope, new_scope


class Scope(BaseScope):  # type: ignore[misc]  # BaseScope is designed to be subclassed
    """tenantguard dependency injection scopes.

    Hierarchy: APP -> UOW

    - APP: Application lifetime (config, policy set, in-memory store)
    - UOW: Unit of Work (one acting user's request)
    """

    APP = new_scope("APP")
    UOW = new_scope("UOW")
