"""
Tabular input: from raw text to a validated numeric sample.

Public API:
    parse_csv(text) -> Table
    detect_numeric_columns(headers, rows) -> list[str]
    select_columns(numeric) -> ColumnSelection
    build_sample(rows, x, y) -> Sample
    read_text(path) -> str

Example:
    >>> from quickfit.tabular import parse_csv, detect_numeric_columns, select_columns, build_sample
    >>> table = parse_csv("x,y\\n1,3\\n2,5\\n3,7\\n4,9")
    >>> selection = select_columns(detect_numeric_columns(table.headers, table.rows))
    >>> sample = build_sample(table.rows, selection.x, selection.y)
    >>> len(sample)
    4
"""

from quickfit.tabular.numbers import ParseMode, parse_number, parse_values
from quickfit.tabular.parser import Column, Table, parse_csv
from quickfit.tabular.schema import (
    ColumnSelection,
    detect_numeric_columns,
    select_columns,
)
from quickfit.tabular.sample import Sample, build_sample
from quickfit.tabular.source import read_text

__all__ = [
    "ParseMode",
    "parse_number",
    "parse_values",
    "Column",
    "Table",
    "parse_csv",
    "ColumnSelection",
    "detect_numeric_columns",
    "select_columns",
    "Sample",
    "build_sample",
    "read_text",
]
