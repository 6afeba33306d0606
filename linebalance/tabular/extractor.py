"""
Column Extractor

Pulls raw (x, y) value pairs out of delimited text for charting, so a chart
is drawn from the file's own values rather than from summary figures.
"""

from typing import Any, Dict, List, Sequence

import pandas as pd

from .models import ChartData
from .parser import split_fields, split_lines
from ..schemas import ChartRequest
from ..utils.logging_utils import get_logger
from ..utils.stats_utils import coerce_numeric

logger = get_logger(__name__)

# Upper bound on emitted points; later rows are dropped.
CHART_POINT_LIMIT = 2000


def coerce_values(raw: Sequence[str]) -> List[Any]:
    """Return each value as a float when it parses as one, else the string."""
    numbers = coerce_numeric(raw)
    return [
        value if pd.isna(number) else float(number)
        for value, number in zip(raw, numbers)
    ]


def get_raw_data_for_chart(text: str, x_key: str, y_key: str) -> List[Dict[str, Any]]:
    """
    Extract paired values of two columns, row by row.

    A row contributes a point only when it has both fields. At most
    ``CHART_POINT_LIMIT`` points are returned. An empty list means nothing
    could be extracted (no data rows, or a key that is not a header).

    Args:
        text: Raw text, header line first
        x_key: Header of the x column
        y_key: Header of the y column

    Returns:
        List of ``{x_key: value, y_key: value}`` dicts in file order

    Example:
        >>> get_raw_data_for_chart("a,b\\n1,2\\n3,4", "a", "b")
        [{'a': 1.0, 'b': 2.0}, {'a': 3.0, 'b': 4.0}]
    """
    lines = split_lines(text)
    if len(lines) < 2:
        return []

    headers = [h.strip() for h in split_fields(lines[0])]
    if x_key not in headers or y_key not in headers:
        logger.warning(f"Column(s) not found for chart: x={x_key!r}, y={y_key!r}")
        return []

    x_index = headers.index(x_key)
    y_index = headers.index(y_key)

    raw_x: List[str] = []
    raw_y: List[str] = []

    for line in lines[1:]:
        if len(raw_x) >= CHART_POINT_LIMIT:
            logger.debug(f"Chart point limit {CHART_POINT_LIMIT} reached; remaining rows dropped")
            break

        if not line.strip():
            continue

        parts = split_fields(line)
        if x_index >= len(parts) or y_index >= len(parts):
            continue

        raw_x.append(parts[x_index].strip())
        raw_y.append(parts[y_index].strip())

    xs = coerce_values(raw_x)
    ys = coerce_values(raw_y)

    points: List[Dict[str, Any]] = []
    for x, y in zip(xs, ys):
        point: Dict[str, Any] = {}
        point[x_key] = x
        point[y_key] = y
        points.append(point)

    return points


def build_chart_data(text: str, request: ChartRequest) -> ChartData:
    """
    Assemble a chart payload for a renderer.

    Points supplied with the request are used as-is; otherwise they are
    extracted from ``text``.

    Args:
        text: Raw text of the current dataset
        request: Validated chart request

    Returns:
        ChartData with the points and axis keys
    """
    if request.data:
        data = list(request.data)
        logger.debug(f"Using {len(data)} caller-supplied points for '{request.title}'")
    else:
        data = get_raw_data_for_chart(text, request.x_key, request.y_key)
        logger.debug(f"Extracted {len(data)} points for '{request.title}'")

    return ChartData(
        title=request.title,
        type=request.type,
        data=data,
        x_key=request.x_key,
        y_key=request.y_key,
    )
