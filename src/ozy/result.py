"""Tagged success/failure values passed between components."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclass(frozen=True)
class Ok(Generic[T]):
    """Successful outcome carrying a value."""

    value: T


@dataclass(frozen=True)
class Err(Generic[E]):
    """Failed outcome.

    `silent` asks callers not to print the failure while still acting on
    its kind. `details` carries structured data useful for remediation.
    """

    kind: E
    reason: str
    silent: bool = False
    details: list[str] = field(default_factory=list)


Result = Ok[T] | Err[E]
