"""Outcome model, the success-or-failure value returned by every step."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Callable, Generic, NoReturn, Optional, TypeVar, Union

from .errors import UnwrapError

T = TypeVar("T")
U = TypeVar("U")


@dataclass(frozen=True)
class StepError:
    """Human-readable description of why a step failed.

    ``cause`` keeps the originating exception when the failure was converted
    from one (see :func:`stepwise.adapters.catching`).  It does not take part
    in equality, so two failures with the same message compare equal.
    """

    message: str
    cause: Optional[BaseException] = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "message", str(self.message))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, StepError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash(self.message)

    def __str__(self) -> str:
        return self.message

    @classmethod
    def of(cls, error: Union["StepError", str, BaseException]) -> "StepError":
        """Coerce text or an exception into a ``StepError``."""
        if isinstance(error, StepError):
            return error
        if isinstance(error, BaseException):
            return cls(str(error) or type(error).__name__, cause=error)
        return cls(error)


class Outcome(ABC, Generic[T]):
    """Result of applying a step: exactly one of :class:`Success` or :class:`Failure`.

    Abstract; only :class:`Success` and :class:`Failure` can be built.
    Use ``isinstance`` or :attr:`ok` to branch::

        outcome = chain.apply(1)
        if outcome.ok:
            print(outcome.value)
        else:
            print(f"failed: {outcome.error}")
    """

    __slots__ = ()

    @property
    @abstractmethod
    def ok(self) -> bool: ...

    @abstractmethod
    def unwrap(self) -> T: ...

    @abstractmethod
    def unwrap_or(self, default: T) -> T: ...

    @abstractmethod
    def map(self, fn: Callable[[T], U]) -> "Outcome[U]": ...

    @abstractmethod
    def and_then(self, fn: Callable[[T], "Outcome[U]"]) -> "Outcome[U]": ...


@dataclass(frozen=True)
class Success(Outcome[T]):
    """Successful outcome carrying ``value``."""

    value: T

    @property
    def ok(self) -> bool:
        return True

    def unwrap(self) -> T:
        return self.value

    def unwrap_or(self, default: T) -> T:
        return self.value

    def map(self, fn: Callable[[T], U]) -> "Outcome[U]":
        return Success(fn(self.value))

    def and_then(self, fn: Callable[[T], "Outcome[U]"]) -> "Outcome[U]":
        return fn(self.value)


@dataclass(frozen=True)
class Failure(Outcome[T]):
    """Failed outcome carrying a :class:`StepError`.

    Plain strings and exceptions are coerced on construction, so
    ``Failure("division by zero")`` is the usual spelling.
    """

    error: StepError

    def __post_init__(self) -> None:
        if not isinstance(self.error, StepError):
            object.__setattr__(self, "error", StepError.of(self.error))

    @property
    def ok(self) -> bool:
        return False

    def unwrap(self) -> NoReturn:
        raise UnwrapError(self.error) from self.error.cause

    def unwrap_or(self, default: T) -> T:
        return default

    def map(self, fn: Callable[[T], U]) -> "Outcome[U]":
        return self

    def and_then(self, fn: Callable[[T], "Outcome[U]"]) -> "Outcome[U]":
        return self


def success(value: T) -> Success[T]:
    """Build a successful outcome."""
    return Success(value)


def failure(error: Union[StepError, str, BaseException]) -> Failure[Any]:
    """Build a failed outcome from a message, an exception or a ``StepError``."""
    return Failure(StepError.of(error))
