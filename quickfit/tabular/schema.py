"""
Schema Detector.

Decides which columns are numeric by sampling a bounded prefix of rows,
then picks the input (X) and target (Y) columns with a fixed rule.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from quickfit.core.exceptions import SchemaError
from quickfit.tabular.numbers import ParseMode, check_parse_mode, parse_number
from quickfit.tabular.parser import Row

# Only the first SAMPLE_ROWS rows are inspected per column.
SAMPLE_ROWS = 30

# Evidence needed never exceeds this, however many rows the table has.
MAX_EVIDENCE_THRESHOLD = 10


@dataclass(frozen=True)
class ColumnSelection:
    """The chosen input and target columns, plus every numeric candidate."""
    x: str
    y: str
    numeric_columns: tuple[str, ...]


def evidence_threshold(n_rows: int) -> int:
    """
    Numeric cells a column needs to count as numeric.

    min(10, floor(n_rows / 2)): about half the rows for small tables,
    a flat 10 for anything with 20 rows or more. Tables with 0 or 1 rows
    give 0, so every column qualifies.
    """
    return min(MAX_EVIDENCE_THRESHOLD, n_rows // 2)


def count_numeric_evidence(
    rows: Sequence[Row],
    column: str,
    parsing: ParseMode = 'lenient',
) -> int:
    """Count non-empty cells among the first SAMPLE_ROWS that parse as a number."""
    count = 0
    for row in rows[:SAMPLE_ROWS]:
        value = row.get(column, '')
        if value == '':
            continue
        if parse_number(value, parsing) is not None:
            count += 1
    return count


def detect_numeric_columns(
    headers: Sequence[str],
    rows: Sequence[Row],
    *,
    parsing: ParseMode = 'lenient',
) -> list[str]:
    """
    Classify columns as numeric.

    Args:
        headers: Column names in header order
        rows: All data rows
        parsing: Number-parsing mode, see quickfit.tabular.numbers

    Returns:
        Numeric column names, in header order
    """
    check_parse_mode(parsing)
    threshold = evidence_threshold(len(rows))
    return [
        name for name in headers
        if count_numeric_evidence(rows, name, parsing) >= threshold
    ]


def select_columns(numeric_columns: Sequence[str]) -> ColumnSelection:
    """
    Pick X and Y from the numeric candidates.

    Exactly two: (first, second). More than two: (first, last).

    Raises:
        SchemaError: If fewer than two numeric columns exist
    """
    numeric = tuple(numeric_columns)
    if len(numeric) < 2:
        raise SchemaError(
            f"fewer than 2 numeric columns were detected "
            f"(found {len(numeric)}: {list(numeric)}). Check the CSV.",
            numeric_columns=list(numeric),
        )
    return ColumnSelection(x=numeric[0], y=numeric[-1], numeric_columns=numeric)
