"""
Statistical utilities for the line balancing toolkit.
Provides numeric coercion, column type inference and the per-column
statistics used by the dataset summarizer.
"""

import math
import numbers
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional, Sequence

import numpy as np
import pandas as pd


# Share of non-missing values that must parse as numbers for a column to be
# classified as numeric. The comparison is strict (> 0.8).
NUMERIC_RATIO_THRESHOLD = 0.8

TOP_VALUES_LIMIT = 5


def coerce_numeric(values: Iterable[Any]) -> pd.Series:
    """
    Parse raw values as numbers, NaN where a value is not numeric.

    Strings are stripped first. NaN never counts as a number, while
    infinities do (they are reported as null later on). Booleans and
    non-numeric objects are not numbers.

    Args:
        values: Raw values, usually strings from the parser

    Returns:
        Float Series aligned with ``values``

    Example:
        >>> coerce_numeric([' 42.5 ', 'n/a', '1_000']).tolist()
        [42.5, nan, nan]
    """
    raw = pd.Series(list(values), dtype=object)

    if raw.empty:
        return pd.Series([], dtype=float)

    def _clean(value: Any) -> Any:
        if isinstance(value, str):
            return value.strip()
        if isinstance(value, bool) or not isinstance(value, numbers.Real):
            return None
        return value

    return pd.to_numeric(raw.map(_clean), errors='coerce').astype(float)


def to_number(value: Any) -> Optional[float]:
    """
    Coerce a single raw value to a float.

    Args:
        value: Raw value

    Returns:
        The parsed float, or None if the value is not numeric

    Example:
        >>> to_number(" 42.5 ")
        42.5
        >>> to_number("n/a") is None
        True
    """
    number = coerce_numeric([value]).iloc[0]

    if math.isnan(number):
        return None

    return float(number)


def safe_round(value: Any, ndigits: int = 2) -> Optional[float]:
    """Round to ``ndigits`` decimals, mapping NaN/Infinity to None."""
    if value is None:
        return None
    value = float(value)
    if not math.isfinite(value):
        return None
    return round(value, ndigits)


def infer_column_type(
    values: Sequence[str],
    numeric_threshold: float = NUMERIC_RATIO_THRESHOLD
) -> str:
    """
    Infer whether a column of non-missing values is numeric or categorical.

    Args:
        values: Non-missing raw values of one column
        numeric_threshold: Share of values that must parse as numbers

    Returns:
        'numeric' or 'categorical'

    Example:
        >>> infer_column_type(['1', '2', '3', 'x', '5', '6'])
        'numeric'
    """
    if len(values) == 0:
        return 'categorical'

    parsed = coerce_numeric(values)
    numeric_ratio = parsed.notna().sum() / len(values)

    if numeric_ratio > numeric_threshold:
        return 'numeric'

    return 'categorical'


def calculate_numeric_stats(values: Sequence[Any]) -> Optional[Dict[str, Any]]:
    """
    Calculate count, mean, median, min, max and population standard deviation.

    Values that do not parse as numbers are ignored. Every statistic except
    ``count`` is rounded to 2 decimals; non-finite results become None.

    Args:
        values: Raw values of one column

    Returns:
        Dictionary of statistics, or None when no value is numeric

    Example:
        >>> calculate_numeric_stats(['1', '2', '3', '4'])['median']
        2.5
    """
    parsed = coerce_numeric(values).dropna()

    if parsed.empty:
        return None

    arr = np.sort(parsed.to_numpy(dtype=float))

    # inf - inf and friends produce NaN; those are mapped to None below
    with np.errstate(all='ignore'):
        mean = np.mean(arr)
        median = np.median(arr)
        std_dev = np.sqrt(np.mean((arr - mean) ** 2))

    return {
        'count': int(arr.size),
        'mean': safe_round(mean),
        'median': safe_round(median),
        'min': safe_round(arr[0]),
        'max': safe_round(arr[-1]),
        'std_dev': safe_round(std_dev),
    }


def top_values(values: Sequence[str], limit: int = TOP_VALUES_LIMIT) -> List[Dict[str, Any]]:
    """
    Most frequent values, highest count first, ties in first-seen order.

    Args:
        values: Non-missing raw values of one column
        limit: Maximum number of entries to return

    Returns:
        List of ``{'value': ..., 'count': ...}`` dicts
    """
    counts = Counter(values)
    return [
        {'value': value, 'count': count}
        for value, count in counts.most_common(limit)
    ]


def unique_count(values: Sequence[str]) -> int:
    """Number of distinct values."""
    return len(set(values))
