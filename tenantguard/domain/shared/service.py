"""Base class for stateless domain services."""

from dataclasses import dataclass
from typing import Any, dataclass_transform


@dataclass_transform()
class _ServiceMeta(type):
    """Turns every Service subclass into a dataclass over its collaborators."""

    def __new__(mcs, name: str, bases: tuple[type, ...], namespace: dict[str, Any]):
        cls = super().__new__(mcs, name, bases, namespace)
        if any(isinstance(b, mcs) for b in bases):
            # Collaborators are repositories and gateways; their repr is noise
            return dataclass(cls, repr=False)
        return cls


class Service(metaclass=_ServiceMeta):
    """Domain service holding injected ports as underscore-prefixed fields.

    Services never raise for business-rule failures; they return an Outcome.
    """

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"
