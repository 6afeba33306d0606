"""
Tabular Parser

Turns raw comma-delimited text into records. The first line is the header;
every following non-blank line is a row. Splitting is a plain split on
commas: quoted fields containing commas are NOT supported and will be cut
apart.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, List

from pydantic import ValidationError

from ..balancing.models import Task
from ..utils.logging_utils import get_logger
from ..utils.stats_utils import to_number

logger = get_logger(__name__)

DELIMITER = ','
PREDECESSOR_DELIMITER = ';'


class EmptyInputError(ValueError):
    """Raised when delimited text has no data rows."""


@dataclass
class TabularData:
    """
    Parsed delimited text.

    Attributes:
        headers: Trimmed header names in file order (duplicates kept)
        rows: One mapping per data row from header to trimmed value. A header
            is absent from a row that has fewer fields than there are headers.
    """

    headers: List[str]
    rows: List[Dict[str, str]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    def column(self, name: str) -> List[Any]:
        """Values of one column, None where the row lacks the field."""
        return [row.get(name) for row in self.rows]


def split_lines(text: Any) -> List[str]:
    """Strip surrounding whitespace and split into lines."""
    if not isinstance(text, str):
        return []
    stripped = text.strip()
    if not stripped:
        return []
    return stripped.split('\n')


def split_fields(line: str) -> List[str]:
    return line.split(DELIMITER)


def parse_table(text: str) -> TabularData:
    """
    Parse delimited text into headers and records.

    Args:
        text: Raw text, header line first

    Returns:
        TabularData with at least one row

    Raises:
        EmptyInputError: If the text has fewer than two lines

    Example:
        >>> table = parse_table("a,b\\n1,2\\n3")
        >>> table.rows
        [{'a': '1', 'b': '2'}, {'a': '3'}]
    """
    lines = split_lines(text)

    if len(lines) < 2:
        raise EmptyInputError("Empty or invalid CSV")

    headers = [h.strip() for h in split_fields(lines[0])]
    rows: List[Dict[str, str]] = []

    for line in lines[1:]:
        if not line.strip():
            continue

        values = split_fields(line)
        record = {}
        for i, header in enumerate(headers):
            if i < len(values):
                record[header] = values[i].strip()
        rows.append(record)

    logger.debug(f"Parsed {len(rows)} rows x {len(headers)} columns")

    return TabularData(headers=headers, rows=rows)


def parse_predecessors(raw: str) -> List[str]:
    """Split a ``;``-separated predecessor field into trimmed ids."""
    return [p.strip() for p in raw.split(PREDECESSOR_DELIMITER) if p.strip()]


def parse_csv_to_tasks(text: str) -> List[Task]:
    """
    Read ``id,time,preds`` rows into tasks.

    The header line is skipped. Rows with fewer than two fields, or whose
    time is not a valid non-negative number, are dropped. Never raises.

    Args:
        text: Raw delimited text

    Returns:
        Parsed tasks in file order

    Example:
        >>> [t.id for t in parse_csv_to_tasks("id,time,preds\\nA,30,\\nB,20,A")]
        ['A', 'B']
    """
    lines = split_lines(text)
    tasks: List[Task] = []

    for line_no, line in enumerate(lines[1:], start=2):
        line = line.strip()
        if not line:
            continue

        parts = split_fields(line)
        if len(parts) < 2:
            logger.debug(f"Line {line_no}: fewer than 2 fields, skipped")
            continue

        time = to_number(parts[1])
        if time is None:
            logger.warning(f"Line {line_no}: time {parts[1].strip()!r} is not a number, skipped")
            continue

        preds = parse_predecessors(parts[2]) if len(parts) > 2 else []

        try:
            task = Task(id=parts[0].strip(), time=time, preds=preds)
        except ValidationError as e:
            logger.warning(f"Line {line_no}: invalid task skipped ({e.error_count()} error(s))")
            continue

        tasks.append(task)

    return tasks
