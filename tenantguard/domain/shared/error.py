"""Error hierarchy for tenantguard.

Error layers:
- TenantGuardError: Base class for all tenantguard errors
- DomainError: Business rule violations, denied access, rejected transitions
- InfrastructureError: System-level failures like storage or misconfiguration

The policy engine and role-transition guard never raise these for expected
denials; they are raised only by the opt-in surfaces (PolicySet.guard and
the command handler gate) and mapped to responses by the host application.
"""


class TenantGuardError(Exception):
    """Base class for all tenantguard errors."""

    def __init__(self, message: str, code: str | None = None) -> None:
        self.message = message
        self.code = code or self.__class__.__name__
        super().__init__(message)


# =============================================================================
# Domain Errors (business logic violations - typically 4xx)
# =============================================================================


class DomainError(TenantGuardError):
    """Base class for domain/business errors."""


class NotFoundError(DomainError):
    """Resource not found."""


class ValidationError(DomainError):
    """Input validation failed.

    Carries every triggered message so callers can surface each one.
    """

    def __init__(self, messages: str | list[str], field: str | None = None) -> None:
        self.messages = [messages] if isinstance(messages, str) else list(messages)
        super().__init__("; ".join(self.messages), code="VALIDATION_ERROR")
        self.field = field


class InvalidStateError(DomainError):
    """Operation not allowed in current state."""


class ConflictError(DomainError):
    """Resource already exists or version conflict."""


class AuthorizationError(DomainError):
    """Actor not authorized for this operation."""


class InvalidTransitionError(DomainError):
    """Proposed role change is not in the transition allow-list."""


# Names used by host applications for the three denial outcomes.
AuthorizationDenied = AuthorizationError
InvalidTransition = InvalidTransitionError


# =============================================================================
# Infrastructure Errors (system-level failures - typically 503)
# =============================================================================


class InfrastructureError(TenantGuardError):
    """Base class for infrastructure/system errors."""


class StorageUnavailableError(InfrastructureError):
    """Storage backend is unavailable."""


class ConfigurationError(InfrastructureError):
    """System misconfiguration detected."""
