"""Satisfiability of two-variable boolean conditions via the implication graph."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from taskbook.scc import component_labels

_BINARY = {"|": "|", "-": "->", "&": "&", "^": "^"}


@dataclass(frozen=True)
class Condition:
    """A condition ``first op second`` or a negation ``!first``.

    ``operator`` is one of ``|``, ``->``, ``&``, ``^`` or ``!``.
    """

    first: int
    operator: str
    second: int | None = None

    def __post_init__(self) -> None:
        if self.operator == "!":
            if self.second is not None:
                raise ValueError("a negation takes one variable")
        elif self.operator in _BINARY.values():
            if self.second is None:
                raise ValueError(f"operator {self.operator!r} takes two variables")
        else:
            raise ValueError(f"unknown operator {self.operator!r}")

    @property
    def variables(self) -> tuple[int, ...]:
        return (self.first,) if self.second is None else (self.first, self.second)

    def implications(self) -> list[tuple[int, int]]:
        """Implications between literals; a negative literal is a negated variable."""
        x, y = self.first, self.second
        if y is None:
            return [(x, -x)]
        if self.operator == "|":
            return [(-x, y), (-y, x)]
        if self.operator == "->":
            return [(x, y), (-y, -x)]
        if self.operator == "&":
            return [(-x, x), (-y, y)]
        return [(-x, y), (-y, x), (x, -y), (y, -x)]


def _number(token: str) -> int:
    if not token.isdigit():
        raise ValueError(f"expected a variable number, got {token!r}")
    return int(token)


def parse_condition(text: str) -> Condition:
    """Parse ``"x op y"`` (op starting with ``|``, ``-``, ``&`` or ``^``) or ``"!x"``."""
    stripped = text.strip()
    if stripped.startswith("!"):
        return Condition(_number(stripped[1:]), "!")
    parts = stripped.split()
    if len(parts) != 3:
        raise ValueError(f"malformed condition {text!r}")
    first, symbol, second = parts
    operator = _BINARY.get(symbol[0])
    if operator is None:
        raise ValueError(f"unknown operator {symbol!r}")
    return Condition(_number(first), operator, _number(second))


def satisfiable(variable_count: int, conditions: Iterable[Condition | str]) -> bool:
    """True if some assignment of the variables ``1..variable_count`` meets every condition."""
    if variable_count < 0:
        raise ValueError("variable count must not be negative")

    def node(literal: int) -> int:
        return literal if literal > 0 else variable_count - literal

    edges: list[tuple[int, int]] = []
    for condition in conditions:
        if isinstance(condition, str):
            condition = parse_condition(condition)
        for variable in condition.variables:
            if not 1 <= variable <= variable_count:
                raise ValueError(f"variable {variable} is outside 1..{variable_count}")
        edges.extend((node(a), node(b)) for a, b in condition.implications())
    labels = component_labels(2 * variable_count, edges)
    return all(
        labels[x] != labels[x + variable_count] for x in range(variable_count)
    )