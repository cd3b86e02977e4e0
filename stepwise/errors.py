"""Exceptions for programming errors.

A step *failure* is never an exception: it travels as a ``Failure`` value.
The classes here cover mistakes made while building or wiring steps, which
should surface loudly at the call site.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .outcome import StepError


class StepwiseError(Exception):
    """Base class for every exception raised by stepwise."""


class CompositionError(StepwiseError, ValueError):
    """Raised at construction time when a composition cannot be built.

    Example: ``composed()`` called with fewer than two steps.
    """


class NotComposableError(StepwiseError, TypeError):
    """Raised when an object has no ``apply`` method and is not callable."""


class StepContractError(StepwiseError, TypeError):
    """Raised when a step returns something its contract does not allow.

    Covers a callable returning a bare value in strict mode, and a step
    feeding an accumulating composition with a success value that is not a
    ``(value, payload)`` pair.
    """


class UnwrapError(StepwiseError):
    """Raised by ``Outcome.unwrap()`` on a failure."""

    def __init__(self, error: "StepError") -> None:
        super().__init__(f"called unwrap() on a failure: {error}")
        self.error = error
