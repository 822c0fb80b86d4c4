"""Fold helpers for running accumulations."""

from collections.abc import Callable, Iterable
from typing import TypeVar

State = TypeVar("State")
Item = TypeVar("Item")
Output = TypeVar("Output")


def scan(
    step: Callable[[State, Item], tuple[State, Output]],
    initial: State,
    items: Iterable[Item],
) -> tuple[State, tuple[Output, ...]]:
    """Fold items through a step function, keeping every intermediate output.

    Args:
        step: Function receiving the current state and one item and returning
            the next state together with the output for that item.
        initial: State before the first item.
        items: Items to fold in order.

    Returns:
        tuple[State, tuple[Output, ...]]: Final state and per-item outputs.
    """
    state = initial
    outputs: list[Output] = []
    for item in items:
        state, output = step(state, item)
        outputs.append(output)
    return state, tuple(outputs)


__all__ = ["scan"]
