"""
Module: reporting.periods

Purpose:
    Reporting period (Triwulan) labels and curriculum phase (Fase)
    lookup used to pick and caption a PID report.

Key Functions:
    - period_key(): "Triwulan 1" -> "triwulan_1"
    - period_label(): "triwulan_1" -> "Triwulan 1"
    - determine_phase(): Grade string -> "A" / "B" / "C" / "-"

Dependencies:
    - re (std)
"""

from __future__ import annotations

import re
from typing import Optional

PERIOD_KEYS = {
    "Triwulan 1": "triwulan_1",
    "Triwulan 2": "triwulan_2",
    "Triwulan 3": "triwulan_3",
    "Triwulan 4": "triwulan_4",
}

# (lowest grade, highest grade, phase)
PHASES = (
    (1, 2, "A"),
    (3, 4, "B"),
    (5, 6, "C"),
)

NO_PHASE = "-"

_FIRST_NUMBER = re.compile(r"\d+")


def period_key(label: str) -> str:
    """
    API period key for a display label.

    Raises:
        KeyError: If label is not a known Triwulan
    """
    try:
        return PERIOD_KEYS[label]
    except KeyError:
        raise KeyError(f"Unknown period label: {label!r}") from None


def period_label(key: str) -> str:
    """Display label for an API period key ("triwulan_2" -> "Triwulan 2")."""
    for label, known in PERIOD_KEYS.items():
        if known == key:
            return label
    return key.replace("_", " ").title()


def determine_phase(grade: Optional[str]) -> str:
    """
    Curriculum phase for a grade string such as "5" or "3B".

    The first number in the string is the grade. Grades 1-2 are phase A,
    3-4 phase B, 5-6 phase C; anything else is "-".
    """
    if not grade:
        return NO_PHASE
    match = _FIRST_NUMBER.search(str(grade))
    if match is None:
        return NO_PHASE
    number = int(match.group())
    for low, high, phase in PHASES:
        if low <= number <= high:
            return phase
    return NO_PHASE
