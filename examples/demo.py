#!/usr/bin/env python3
"""
Walk through the stepwise combinators on small arithmetic steps.

Run with STEPWISE_TRACE=1 to see short-circuits in the debug log.
"""

import logging

from dotenv import load_dotenv
from rich.console import Console
from rich.table import Table

from stepwise import (
    Failure,
    Outcome,
    Step,
    Success,
    catching,
    compose,
    compose_t,
    composed,
)

console = Console()


class AddTo(Step[int, int]):
    def __init__(self, addend: int) -> None:
        self.addend = addend

    def apply(self, value: int) -> Outcome[int]:
        return Success(value + self.addend)


class MultiplyBy(Step[int, int]):
    def __init__(self, factor: int) -> None:
        self.factor = factor

    def apply(self, value: int) -> Outcome[int]:
        return Success(value * self.factor)


class DivideBy(Step[int, float]):
    def __init__(self, divisor: float) -> None:
        self.divisor = divisor

    def apply(self, value: int) -> Outcome[float]:
        if self.divisor == 0.0:
            return Failure("division by zero")
        return Success(value / self.divisor)


class AddToMsg(Step[int, tuple]):
    def __init__(self, addend: int) -> None:
        self.addend = addend

    def apply(self, value: int) -> Outcome[tuple]:
        return Success((value + self.addend, "hello"))


def squared(x: int) -> Outcome[int]:
    return Success(x * x)


@catching(ValueError)
def parse_int(text: str) -> int:
    return int(text)


def build_scenarios():
    """Return (label, step, input) triples to run."""
    return [
        ("add 4, multiply by 2", compose(AddTo(4), MultiplyBy(2)), 1),
        ("fluent form", AddTo(4).compose(MultiplyBy(2)), 1),
        (
            "add, multiply, divide",
            composed(AddTo(4), MultiplyBy(2), DivideBy(2.0)),
            1,
        ),
        ("divide by zero", composed(AddTo(4), DivideBy(0.0)), 1),
        ("closure", composed(AddTo(4), lambda x: Success(x * x)), 1),
        ("named function", composed(AddTo(4), squared, MultiplyBy(2)), 1),
        (
            "side payloads",
            compose_t(AddToMsg(1), lambda x: Success((x * x, "world"))),
            2,
        ),
        ("parse then add", composed(parse_int, AddTo(1)), "41"),
        ("parse failure", composed(parse_int, AddTo(1)), "forty-one"),
    ]


def main():
    load_dotenv()
    logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    table = Table(title="stepwise scenarios")
    table.add_column("Scenario", style="cyan")
    table.add_column("Chain")
    table.add_column("Input", justify="right")
    table.add_column("Outcome")

    for label, chain, value in build_scenarios():
        outcome = chain.apply(value)
        if outcome.ok:
            rendered = f"[green]{outcome.value!r}[/green]"
        else:
            rendered = f"[red]failed: {outcome.error}[/red]"
        table.add_row(label, chain.name, repr(value), rendered)

    console.print(table)


if __name__ == "__main__":
    main()
