"""Condensing chemical formulas with one-letter elements and nested brackets."""

from __future__ import annotations

import re
from collections import Counter
from typing import Mapping

_PART_PATTERN = re.compile(r"([A-Z()])(\d*)")


def _parts(formula: str) -> list[tuple[str, int]]:
    parts: list[tuple[str, int]] = []
    position = 0
    while position < len(formula):
        match = _PART_PATTERN.match(formula, position)
        if match is None:
            raise ValueError(
                f"unexpected character {formula[position]!r} at position {position}"
            )
        symbol, digits = match.groups()
        parts.append((symbol, int(digits) if digits else 1))
        position = match.end()
    return parts


def atom_counts(formula: str) -> dict[str, int]:
    """Count the atoms of each one-letter element, multiplying through brackets.

    A number after ``)`` multiplies the whole bracket; a number after ``(`` is
    ignored. The result is ordered alphabetically.
    """
    counts: Counter[str] = Counter()
    multipliers = [1]
    for symbol, number in reversed(_parts(formula)):
        if symbol == ")":
            multipliers.append(multipliers[-1] * number)
        elif symbol == "(":
            if len(multipliers) == 1:
                raise ValueError("unbalanced '(' in formula")
            multipliers.pop()
        else:
            counts[symbol] += number * multipliers[-1]
    return {element: counts[element] for element in sorted(counts)}


def format_counts(counts: Mapping[str, int]) -> str:
    """Write counts alphabetically, omitting zero counts and counts of one."""
    return "".join(
        element if amount == 1 else f"{element}{amount}"
        for element, amount in sorted(counts.items())
        if amount != 0
    )


def condense_formula(formula: str) -> str:
    """Rewrite a formula as a bracket-free list of elements with their totals."""
    return format_counts(atom_counts(formula))