"""
Module: assessment.aggregator

Purpose:
    Averages raw assessment scores. Only entries that are present,
    non-zero and on the score scale take part; everything else is
    treated as "not entered yet".

Key Functions:
    - average(): Mean of qualifying scores, rounded half-up
    - qualifying_scores(): The entries average() would use
    - round_half_up(): Rounding rule shared by all averages

Dependencies:
    - decimal (std): Exact half-up rounding
    - report_toolkit.config: Score scale

Used By:
    - assessment.recalculator

Note:
    A genuine score of exactly 0 cannot be told apart from an empty
    input and is excluded. Python's round() uses banker's rounding
    (round(88.5) == 88), so rounding goes through Decimal instead.
"""

from __future__ import annotations

from decimal import Decimal, ROUND_HALF_UP
from numbers import Real
from typing import Iterable, List, Optional

from report_toolkit.config import DEFAULT_CONFIG, ReportConfig


def round_half_up(value: float, ndigits: int = 0) -> float:
    """
    Round value to ndigits decimals with ties going up.

    Args:
        value: Number to round
        ndigits: Decimal places to keep (0 returns an int)

    Returns:
        int when ndigits == 0, otherwise float

    Example:
        >>> round_half_up(88.5)
        89
        >>> round_half_up(86.25, 1)
        86.3
    """
    exponent = Decimal(1).scaleb(-ndigits)
    rounded = Decimal(str(value)).quantize(exponent, rounding=ROUND_HALF_UP)
    if ndigits == 0:
        return int(rounded)
    return float(rounded)


def qualifying_scores(
    values: Iterable[object],
    config: ReportConfig = DEFAULT_CONFIG,
) -> List[Real]:
    """
    Filter values down to the entries that count towards an average.

    An entry qualifies if it is a real number or Decimal (not bool, not None),
    strictly greater than 0 and within the configured scale.
    """
    result = []
    for value in values:
        if value is None or isinstance(value, bool) or not isinstance(value, (Real, Decimal)):
            continue
        if isinstance(value, Decimal) and value.is_nan():
            continue
        if value > 0 and config.in_scale(value):
            result.append(value)
    return result


def average(
    values: Iterable[object],
    ndigits: int = 0,
    config: Optional[ReportConfig] = None,
) -> float:
    """
    Average the qualifying entries of values.

    Total over any input: absent, zero, out-of-range and non-numeric
    entries are skipped, and an input with no qualifying entry averages
    to 0.

    Args:
        values: Raw scores, may contain None/0/out-of-range entries
        ndigits: Decimal places kept after rounding (0 = integer)
        config: Score scale settings (defaults to DEFAULT_CONFIG)

    Returns:
        Rounded mean, or 0 if nothing qualifies

    Example:
        >>> average([90, 90, 85, 90])
        89
        >>> average([0, None, 120])
        0
    """
    valid = qualifying_scores(values, config or DEFAULT_CONFIG)
    if not valid:
        return 0
    total = sum(Decimal(str(v)) for v in valid)
    mean = total / len(valid)
    return round_half_up(mean, ndigits)
