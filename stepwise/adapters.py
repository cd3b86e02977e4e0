"""Adapters that turn ordinary callables into steps."""

from __future__ import annotations

import functools
import logging
from typing import Any, Callable, Optional, Type, TypeVar

from .config import get_settings
from .errors import NotComposableError, StepContractError
from .outcome import Failure, Outcome, StepError, Success
from .protocol import Composable, Step, step_name

logger = logging.getLogger(__name__)

I = TypeVar("I")
O = TypeVar("O")


class FunctionStep(Step[I, O]):
    """Step backed by a plain callable: function, lambda, closure or method.

    The callable must return an ``Outcome``.  With ``strict=False`` a bare
    return value is wrapped in ``Success`` instead of being rejected.
    ``strict`` defaults to ``Settings.strict_outcomes`` at construction time.
    """

    def __init__(
        self,
        fn: Callable[[I], Any],
        *,
        name: Optional[str] = None,
        strict: Optional[bool] = None,
    ) -> None:
        if not callable(fn):
            raise NotComposableError(f"{fn!r} is not callable")
        self.fn = fn
        self.strict = get_settings().strict_outcomes if strict is None else strict
        self._name = name or step_name(fn)
        functools.update_wrapper(self, fn, updated=())

    @property
    def name(self) -> str:
        return self._name

    def apply(self, value: I) -> Outcome[O]:
        result = self.fn(value)
        if isinstance(result, Outcome):
            return result
        if self.strict:
            raise StepContractError(
                f"step {self.name!r} returned {type(result).__name__}, "
                "expected Success or Failure"
            )
        return Success(result)


def as_step(obj: Any) -> Composable[Any, Any]:
    """Return *obj* as something with an ``apply`` method.

    Objects that already satisfy :class:`Composable` are returned unchanged;
    other callables are wrapped in :class:`FunctionStep`.
    """
    if isinstance(obj, type):
        raise NotComposableError(
            f"{obj.__name__} is a class; pass an instance of it as a step"
        )
    if isinstance(obj, Composable):
        return obj
    if callable(obj):
        return FunctionStep(obj)
    raise NotComposableError(
        f"{type(obj).__name__} object has no apply() method and is not callable"
    )


def step(
    fn: Optional[Callable[[Any], Any]] = None,
    *,
    name: Optional[str] = None,
    strict: Optional[bool] = None,
) -> Any:
    """Decorator turning a function into a :class:`FunctionStep`.

    Usable bare or with options::

        @step
        def squared(x: int) -> Outcome[int]:
            return Success(x * x)

        @step(strict=False)
        def doubled(x: int) -> int:
            return x * 2
    """

    def decorate(f: Callable[[Any], Any]) -> FunctionStep[Any, Any]:
        return FunctionStep(f, name=name, strict=strict)

    if fn is None:
        return decorate
    return decorate(fn)


def catching(*exc_types: Any, name: Optional[str] = None) -> Any:
    """Decorator adapting a raising function into a step.

    The function's return value becomes ``Success``; an exception of one of
    *exc_types* (default ``Exception``) becomes a ``Failure`` whose
    ``StepError.cause`` is the exception.  Anything else propagates::

        @catching(ZeroDivisionError)
        def reciprocal(x: float) -> float:
            return 1 / x
    """
    # Bare ``@catching`` passes the function itself as the only argument.
    if len(exc_types) == 1 and _is_plain_callable(exc_types[0]):
        return catching(name=name)(exc_types[0])

    for exc_type in exc_types:
        if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
            raise TypeError(
                f"catching() expects exception classes, got {exc_type!r}"
            )
    caught: tuple[Type[BaseException], ...] = exc_types or (Exception,)

    def decorate(fn: Callable[[Any], Any]) -> FunctionStep[Any, Any]:
        @functools.wraps(fn)
        def guarded(value: Any) -> Outcome[Any]:
            try:
                result = fn(value)
            except caught as exc:
                logger.debug(
                    "Step %s raised %s, returning it as a failure",
                    step_name(fn),
                    type(exc).__name__,
                )
                return Failure(StepError.of(exc))
            if isinstance(result, Outcome):
                return result
            return Success(result)

        return FunctionStep(guarded, name=name, strict=True)

    return decorate


def _is_plain_callable(obj: Any) -> bool:
    return callable(obj) and not isinstance(obj, type)
