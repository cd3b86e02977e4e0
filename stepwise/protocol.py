"""Structural protocol for steps and the optional ``Step`` base class."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, Protocol, TypeVar, runtime_checkable

from .outcome import Outcome

if TYPE_CHECKING:
    from .compose import AccumulatingComposition, Composition

I = TypeVar("I")
O = TypeVar("O")
I_contra = TypeVar("I_contra", contravariant=True)
O_co = TypeVar("O_co", covariant=True)


@runtime_checkable
class Composable(Protocol[I_contra, O_co]):
    """Structural protocol that every step (and every composition) satisfies.

    Any object with an ``apply`` method qualifies; no base class is needed::

        class AddTo:
            def __init__(self, addend: int) -> None:
                self.addend = addend

            def apply(self, value: int) -> Outcome[int]:
                return Success(value + self.addend)

    Plain functions and closures qualify through
    :func:`stepwise.adapters.as_step`, which every composition calls on its
    arguments.

    ``@runtime_checkable`` lets ``as_step`` tell step objects apart from
    bare callables with ``isinstance``.
    """

    def apply(self, value: I_contra) -> Outcome[O_co]: ...


class Step(ABC, Generic[I, O]):
    """Convenience base class for steps.

    Subclassing is optional.  It adds left-to-right chaining
    (``AddTo(4).compose(MultiplyBy(2))``), makes the step callable and gives
    it a readable :attr:`name` for reprs and log records.
    """

    @abstractmethod
    def apply(self, value: I) -> Outcome[O]:
        """Run the step on *value*; report failure by returning ``Failure``."""

    def __call__(self, value: I) -> Outcome[O]:
        return self.apply(value)

    @property
    def name(self) -> str:
        return type(self).__name__

    def compose(self, second: Any) -> "Composition[I, Any]":
        """Chain *second* after this step; same as ``compose(self, second)``."""
        from .compose import compose

        return compose(self, second)

    def compose_t(self, second: Any) -> "AccumulatingComposition[I, Any, Any, Any]":
        """Chain *second* after this step, nesting side payloads.

        Same as ``compose_t(self, second)``.
        """
        from .compose import compose_t

        return compose_t(self, second)

    def __repr__(self) -> str:
        return f"<{self.name}>"


def step_name(obj: Any) -> str:
    """Best-effort display name for any step-like object."""
    name = getattr(obj, "name", None)
    if isinstance(name, str):
        return name
    name = getattr(obj, "__name__", None)
    if isinstance(name, str):
        return name
    return type(obj).__name__

