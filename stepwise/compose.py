"""Composition combinators.

Public surface::

    compose(first, second)      # I -> M, M -> O            gives I -> O
    composed(s1, s2, ..., sn)   # left fold of compose
    compose_t(first, second)    # I -> (M, A), M -> (O, B)  gives I -> (O, (A, B))
    composed_t(s1, s2, ..., sn) # left fold of compose_t

Every argument goes through :func:`~stepwise.adapters.as_step`, so step
objects, lambdas and named functions can be mixed freely.  Failures are
returned unchanged; the step after a failing one never runs.
"""

from __future__ import annotations

import functools
import logging
from typing import Any, Generic, Tuple, TypeVar

from .adapters import as_step
from .config import get_settings
from .errors import CompositionError, StepContractError
from .outcome import Outcome, Success
from .protocol import Step, step_name

logger = logging.getLogger(__name__)

I = TypeVar("I")
M = TypeVar("M")
O = TypeVar("O")
A = TypeVar("A")
B = TypeVar("B")


class Composition(Step[I, O], Generic[I, M, O]):
    """Run ``first``, then feed its success value to ``second``.

    A composition is itself a step, so compositions nest:
    ``Composition(Composition(a, b), c)`` behaves exactly like
    ``Composition(a, Composition(b, c))``.
    """

    def __init__(self, first: Any, second: Any) -> None:
        self.first = as_step(first)
        self.second = as_step(second)
        self._trace = get_settings().trace

    @property
    def name(self) -> str:
        return f"{step_name(self.first)} >> {step_name(self.second)}"

    def apply(self, value: I) -> Outcome[O]:
        outcome = self.first.apply(value)
        if not outcome.ok:
            if self._trace:
                logger.debug(
                    "%s failed (%s), skipping %s",
                    step_name(self.first),
                    outcome.error,
                    step_name(self.second),
                )
            return outcome
        return self.second.apply(outcome.value)

    def __repr__(self) -> str:
        return f"Composition({self.name})"


class AccumulatingComposition(Step[I, Tuple[O, Tuple[A, B]]], Generic[I, O, A, B]):
    """Compose two pair-returning steps, nesting their side payloads.

    ``first`` returns ``(m, a)`` and ``second`` returns ``(o, b)``; the
    composition returns ``(o, (a, b))``.  Payloads are never inspected.
    """

    def __init__(self, first: Any, second: Any) -> None:
        self.first = as_step(first)
        self.second = as_step(second)
        self._trace = get_settings().trace

    @property
    def name(self) -> str:
        return f"{step_name(self.first)} >>t {step_name(self.second)}"

    def apply(self, value: I) -> Outcome[Tuple[O, Tuple[A, B]]]:
        outcome = self.first.apply(value)
        if not outcome.ok:
            if self._trace:
                logger.debug(
                    "%s failed (%s), skipping %s",
                    step_name(self.first),
                    outcome.error,
                    step_name(self.second),
                )
            return outcome
        intermediate, first_payload = _split_pair(outcome.value, self.first)

        outcome = self.second.apply(intermediate)
        if not outcome.ok:
            if self._trace:
                logger.debug("%s failed (%s)", step_name(self.second), outcome.error)
            return outcome
        result, second_payload = _split_pair(outcome.value, self.second)

        return Success((result, (first_payload, second_payload)))

    def __repr__(self) -> str:
        return f"AccumulatingComposition({self.name})"


def _split_pair(value: Any, source: Any) -> Tuple[Any, Any]:
    if not isinstance(value, tuple) or len(value) != 2:
        raise StepContractError(
            f"step {step_name(source)!r} must succeed with a (value, payload) "
            f"pair, got {value!r}"
        )
    return value


def compose(first: Any, second: Any) -> Composition[Any, Any, Any]:
    """Compose two steps; ``second`` runs only if ``first`` succeeds."""
    return Composition(first, second)


def composed(*steps: Any) -> Composition[Any, Any, Any]:
    """Compose two or more steps left to right.

    ``composed(a, b, c)`` is ``compose(compose(a, b), c)``.

    Raises:
        CompositionError: if fewer than two steps are given.
    """
    if len(steps) < 2:
        raise CompositionError(
            f"composed() needs at least two steps, got {len(steps)}"
        )
    chain = functools.reduce(compose, steps)
    logger.debug("Composed chain of %d steps: %s", len(steps), chain.name)
    return chain


def compose_t(first: Any, second: Any) -> AccumulatingComposition[Any, Any, Any, Any]:
    """Compose two pair-returning steps, keeping both side payloads."""
    return AccumulatingComposition(first, second)


def composed_t(*steps: Any) -> AccumulatingComposition[Any, Any, Any, Any]:
    """Left fold of :func:`compose_t` over two or more pair-returning steps.

    Payloads nest to the left: three steps producing ``a``, ``b`` and ``c``
    yield ``(o, ((a, b), c))``.

    Raises:
        CompositionError: if fewer than two steps are given.
    """
    if len(steps) < 2:
        raise CompositionError(
            f"composed_t() needs at least two steps, got {len(steps)}"
        )
    chain = functools.reduce(compose_t, steps)
    logger.debug("Composed accumulating chain of %d steps: %s", len(steps), chain.name)
    return chain
