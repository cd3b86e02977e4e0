"""Fallible step composition: build typed pipelines from small steps.

Public surface::

    from stepwise import (
        # Outcome model
        Outcome, Success, Failure, StepError, success, failure,
        # Capability
        Composable, Step,
        # Adapters
        FunctionStep, as_step, step, catching,
        # Combinators
        Composition, AccumulatingComposition,
        compose, composed, compose_t, composed_t,
        # Configuration
        Settings, get_settings, configure, reset_settings,
        # Errors
        StepwiseError, CompositionError, NotComposableError,
        StepContractError, UnwrapError,
    )

Example::

    class AddTo(Step[int, int]):
        def __init__(self, addend: int) -> None:
            self.addend = addend

        def apply(self, value: int) -> Outcome[int]:
            return Success(value + self.addend)

    chain = composed(AddTo(4), lambda x: Success(x * x))
    chain.apply(1)  # Success(value=25)
"""

from .adapters import FunctionStep, as_step, catching, step
from .compose import (
    AccumulatingComposition,
    Composition,
    compose,
    compose_t,
    composed,
    composed_t,
)
from .config import Settings, configure, get_settings, reset_settings
from .errors import (
    CompositionError,
    NotComposableError,
    StepContractError,
    StepwiseError,
    UnwrapError,
)
from .outcome import Failure, Outcome, StepError, Success, failure, success
from .protocol import Composable, Step

__all__ = [
    # Outcome model
    "Outcome",
    "Success",
    "Failure",
    "StepError",
    "success",
    "failure",
    # Capability
    "Composable",
    "Step",
    # Adapters
    "FunctionStep",
    "as_step",
    "step",
    "catching",
    # Combinators
    "Composition",
    "AccumulatingComposition",
    "compose",
    "composed",
    "compose_t",
    "composed_t",
    # Configuration
    "Settings",
    "get_settings",
    "configure",
    "reset_settings",
    # Errors
    "StepwiseError",
    "CompositionError",
    "NotComposableError",
    "StepContractError",
    "UnwrapError",
]
