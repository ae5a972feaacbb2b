"""Tagged success/failure values returned by domain services."""

from dataclasses import dataclass
from typing import Generic, TypeVar

T = TypeVar("T")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying the produced value."""

    value: T

    @property
    def ok(self) -> bool:
        return True


@dataclass(frozen=True)
class Err:
    """Failed outcome carrying a user-facing message.

    ``messages`` holds each individual failure when several fired at once;
    it defaults to ``(message,)``.
    """

    message: str
    code: str | None = None
    messages: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        if not self.messages:
            object.__setattr__(self, "messages", (self.message,))

    @classmethod
    def of(cls, messages: list[str], code: str | None = None) -> "Err":
        """Build an Err from several messages, joined for display."""
        return cls("; ".join(messages), code=code, messages=tuple(messages))

    @property
    def ok(self) -> bool:
        return False


Outcome = Ok[T] | Err
