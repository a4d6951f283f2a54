"""
Sample Builder.

Joins the two selected columns into finite (x, y) pairs. A row whose X or
Y cell does not parse, or parses to an infinite value, is dropped; this
is ordinary cleaning, not an error. Only an empty result is fatal.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Sequence

import numpy as np
from numpy.typing import NDArray

from quickfit.core.capabilities import CAPABILITY_MATERIALIZED, CAPABILITY_REPEATABLE
from quickfit.core.exceptions import EmptySampleError
from quickfit.core.validation import (
    check_1d,
    check_array,
    check_consistent_length,
    check_finite,
)
from quickfit.tabular.numbers import ParseMode, parse_values
from quickfit.tabular.parser import Row


@dataclass(frozen=True, eq=False)
class Sample:
    """
    Cleaned (x, y) pairs in original row order.

    Both arrays are finite and of equal length. Implements the DataSource
    protocol.
    """
    _x: NDArray[np.floating[Any]]
    _y: NDArray[np.floating[Any]]
    x_column: str
    y_column: str
    n_rows: int

    @classmethod
    def from_arrays(
        cls,
        x: Any,
        y: Any,
        *,
        x_column: str = 'x',
        y_column: str = 'y',
        n_rows: int | None = None,
    ) -> Sample:
        """
        Build a Sample directly from numeric arrays.

        Raises:
            ValidationError: If either array has non-finite values
            DimensionError: If the arrays differ in length or are not 1D
        """
        x_arr = np.array(check_array(x, 'x'))
        y_arr = np.array(check_array(y, 'y'))
        check_1d(x_arr, 'x')
        check_1d(y_arr, 'y')
        check_consistent_length(x_arr, y_arr, names=('x', 'y'))
        check_finite(x_arr, 'x')
        check_finite(y_arr, 'y')
        x_arr.setflags(write=False)
        y_arr.setflags(write=False)
        return cls(
            _x=x_arr,
            _y=y_arr,
            x_column=x_column,
            y_column=y_column,
            n_rows=len(x_arr) if n_rows is None else n_rows,
        )

    @property
    def x(self) -> NDArray[np.floating[Any]]:
        """Input values (read-only)."""
        return self._x

    @property
    def y(self) -> NDArray[np.floating[Any]]:
        """Target values (read-only)."""
        return self._y

    @property
    def n_observations(self) -> int:
        return int(self._x.shape[0])

    @property
    def n_dropped(self) -> int:
        """Source rows discarded during cleaning."""
        return self.n_rows - self.n_observations

    @property
    def metadata(self) -> dict[str, Any]:
        return {
            'x_column': self.x_column,
            'y_column': self.y_column,
            'n_rows': self.n_rows,
            'n_dropped': self.n_dropped,
        }

    def supports(self, capability: str) -> bool:
        return capability in (CAPABILITY_MATERIALIZED, CAPABILITY_REPEATABLE)

    def pairs(self) -> list[tuple[float, float]]:
        """The sample as a list of (x, y) tuples."""
        return list(zip(self._x.tolist(), self._y.tolist()))

    def __len__(self) -> int:
        return self.n_observations


def build_sample(
    rows: Sequence[Row],
    x_column: str,
    y_column: str,
    *,
    parsing: ParseMode = 'lenient',
) -> Sample:
    """
    Build the Sample from parsed rows.

    Args:
        rows: Data rows from the parser
        x_column: Selected input column
        y_column: Selected target column
        parsing: Number-parsing mode, see quickfit.tabular.numbers

    Returns:
        Sample with len(sample) <= len(rows)

    Raises:
        EmptySampleError: If no row yields two finite numbers
    """
    x_all = parse_values((row.get(x_column, '') for row in rows), parsing)
    y_all = parse_values((row.get(y_column, '') for row in rows), parsing)
    keep = np.isfinite(x_all) & np.isfinite(y_all)

    if not keep.any():
        raise EmptySampleError(
            f"no numeric pairs after cleaning "
            f"(0 of {len(rows)} rows usable for X = \"{x_column}\", Y = \"{y_column}\").",
            n_rows=len(rows),
            x_column=x_column,
            y_column=y_column,
        )

    return Sample.from_arrays(
        x_all[keep],
        y_all[keep],
        x_column=x_column,
        y_column=y_column,
        n_rows=len(rows),
    )
