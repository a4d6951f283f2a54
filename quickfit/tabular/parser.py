"""
Tabular Parser.

Turns raw comma-delimited text into a header and rows of named string
fields. The dialect is deliberately bare: the delimiter is a plain comma
and quoting is not understood, so a quoted field containing a comma is
split in two. Such files mis-parse silently.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping

DELIMITER = ','

_LINE_BREAK = re.compile(r'\r\n|\r|\n')

Row = Mapping[str, str]


@dataclass(frozen=True)
class Column:
    """A header name and its raw cells, in row order."""
    name: str
    values: tuple[str, ...]

    def __len__(self) -> int:
        return len(self.values)


@dataclass(frozen=True)
class Table:
    """
    Parsed text: header names plus rows keyed by those names.

    Every row has exactly the header's keys. When a header name repeats,
    the rightmost cell wins.
    """
    headers: tuple[str, ...]
    rows: tuple[Row, ...]

    @property
    def n_rows(self) -> int:
        return len(self.rows)

    def column(self, name: str) -> Column:
        """
        Raw cells of one column.

        Raises:
            KeyError: If the column does not exist
        """
        if name not in self.headers:
            raise KeyError(
                f"Table has no column '{name}'. Available: {list(self.headers)}"
            )
        return Column(name=name, values=tuple(row[name] for row in self.rows))

    def columns(self) -> list[Column]:
        """All columns in header order."""
        return [self.column(h) for h in dict.fromkeys(self.headers)]


def split_lines(text: str) -> list[str]:
    """Split on any line ending and drop lines that are blank after trimming."""
    return [line for line in _LINE_BREAK.split(text) if line.strip()]


def parse_row(line: str, headers: tuple[str, ...]) -> Row:
    """
    Zip one line's trimmed fields against the header names.

    Missing trailing fields become empty strings; surplus fields are ignored.
    """
    parts = line.split(DELIMITER)
    row: dict[str, str] = {}
    for i, name in enumerate(headers):
        row[name] = parts[i].strip() if i < len(parts) else ''
    return MappingProxyType(row)


def parse_csv(text: str) -> Table:
    """
    Parse raw text into a Table.

    The first non-blank line is the header. Text with no non-blank line
    gives a Table with no headers and no rows.

    Args:
        text: Decoded file contents

    Returns:
        Table with trimmed header names and trimmed cell values

    Example:
        >>> table = parse_csv("x, y\\n1,3\\n\\n2\\n")
        >>> table.headers
        ('x', 'y')
        >>> [dict(r) for r in table.rows]
        [{'x': '1', 'y': '3'}, {'x': '2', 'y': ''}]
    """
    lines = split_lines(text)
    if not lines:
        return Table(headers=(), rows=())

    headers = tuple(h.strip() for h in lines[0].split(DELIMITER))
    rows = tuple(parse_row(line, headers) for line in lines[1:])
    return Table(headers=headers, rows=rows)
