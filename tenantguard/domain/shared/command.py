"""Command and CommandHandler base classes with authorization gate."""

from abc import ABCMeta, abstractmethod
from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from functools import wraps
from typing import Any, ClassVar, Generic, TypeVar, dataclass_transform

from pydantic import BaseModel, ConfigDict

from tenantguard.domain.shared.outcome import Err, Ok


class Command(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    __public__: ClassVar[bool] = False


class Result(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)


C = TypeVar("C", bound=Command)
R = TypeVar("R", bound=Result)

# Unbound async handler method: (self, cmd) -> Coroutine -> Result
_HandlerMethod = Callable[..., Coroutine[Any, Any, Any]]


def unwrap(outcome: Ok[Any] | Err) -> Any:
    """Return the value of an Ok outcome; raise ValidationError for Err."""
    from tenantguard.domain.shared.error import ValidationError

    if isinstance(outcome, Err):
        raise ValidationError(list(outcome.messages), field=outcome.code)
    return outcome.value


def _wrap_run_with_auth(cls: type, original_run: _HandlerMethod) -> _HandlerMethod:
    """Wrap the run() method with __auth__ policy evaluation."""

    @wraps(original_run)
    async def auth_wrapped_run(self: Any, cmd: Any) -> Any:
        from tenantguard.domain.shared.error import AuthorizationError, ConfigurationError

        # Check if the command type is public
        if getattr(type(cmd), "__public__", False):
            return await original_run(self, cmd)

        auth_policy = getattr(type(self), "__auth__", None)
        if auth_policy is None:
            raise ConfigurationError(
                f"Handler {type(self).__name__} has no __auth__ declaration "
                f"and its command is not __public__"
            )

        actor = getattr(self, "actor", None)
        if actor is None:
            raise AuthorizationError("Authentication required", code="missing_actor")

        if not auth_policy.evaluate(actor):
            raise AuthorizationError(
                f"Access denied: insufficient role for {type(self).__name__}",
                code="access_denied",
            )

        return await original_run(self, cmd)

    return auth_wrapped_run


@dataclass_transform()
class _CommandHandlerMeta(ABCMeta):
    """Metaclass that combines ABC with auto-dataclass and __auth__ gate for subclasses."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            cls = dataclass(cls)

            original_run = cls.__dict__.get("run")
            if original_run is not None:
                cls.run = _wrap_run_with_auth(cls, original_run)

        return cls


class CommandHandler(Generic[C, R], metaclass=_CommandHandlerMeta):
    """Base class for command handlers. Subclasses are automatically dataclasses.

    Declare __auth__ to enforce role-based access:
        class MyHandler(CommandHandler[MyCmd, MyResult]):
            __auth__ = requires_role(SystemRole.SUPER_ADMIN)
            actor: Actor
    """

    @abstractmethod
    async def run(self, cmd: C) -> R: ...
