"""Unit-of-work port for transactional mutations."""

from abc import abstractmethod
from contextlib import AbstractAsyncContextManager
from typing import Protocol

from tenantguard.domain.shared.port import Port


class UnitOfWork(Port, Protocol):
    """Groups repository writes so they commit or roll back together."""

    @abstractmethod
    def transaction(self) -> AbstractAsyncContextManager[None]:
        """Open a transaction; an exception inside the block rolls it back."""
        ...
