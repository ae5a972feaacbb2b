"""DI providers for the auth domain."""

from .provider import AuthProvider

__all__ = ["AuthProvider"]
