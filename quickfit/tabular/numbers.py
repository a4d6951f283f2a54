"""
Named number-parsing modes.

Cells arrive as raw strings. How loosely they are read as numbers changes
which columns count as numeric and which rows survive cleaning, so the
rule is an explicit, named choice:

    'lenient' (default)
        Accept the longest numeric prefix after leading whitespace.
        '12abc' -> 12.0, '3.5 kg' -> 3.5, '-Infinity' -> -inf,
        '1e' -> 1.0, 'abc' -> no number, '' -> no number.

    'strict'
        The whole trimmed cell must be a number. '12abc' -> no number.

Both modes share one grammar: optional sign, then 'Infinity' or a decimal
literal of ASCII digits with optional exponent. 'nan', 'inf' and non-ASCII
digits such as '٣' are not numbers in either mode. '1_000' is rejected in
strict mode; lenient mode reads its prefix and gives 1.0.
"""

import re
from typing import Literal, Iterable

import numpy as np
from numpy.typing import NDArray

ParseMode = Literal['lenient', 'strict']

PARSE_MODES: tuple[str, ...] = ('lenient', 'strict')

_NUMBER = r'[+-]?(?:Infinity|(?:[0-9]+(?:\.[0-9]*)?|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)'
_PREFIX_RE = re.compile(r'\s*(' + _NUMBER + r')')
_FULL_RE = re.compile(_NUMBER)


def check_parse_mode(mode: str) -> None:
    """Raise ValueError for an unknown parsing mode."""
    if mode not in PARSE_MODES:
        raise ValueError(
            f"Unknown parsing mode: {mode!r}. Use one of {PARSE_MODES}"
        )


def parse_number(text: str, mode: ParseMode = 'lenient') -> float | None:
    """
    Parse one cell.

    Args:
        text: Raw cell text
        mode: 'lenient' or 'strict'

    Returns:
        The parsed float (possibly infinite), or None if the cell holds
        no number under the chosen mode.
    """
    check_parse_mode(mode)
    if mode == 'strict':
        match = _FULL_RE.fullmatch(text.strip())
        return None if match is None else float(match.group(0))

    match = _PREFIX_RE.match(text)
    return None if match is None else float(match.group(1))


def parse_values(values: Iterable[str], mode: ParseMode = 'lenient') -> NDArray[np.float64]:
    """
    Parse a sequence of cells into a float64 array.

    Cells with no number become NaN, so ``np.isfinite`` on the result
    marks exactly the usable entries.
    """
    check_parse_mode(mode)
    parsed = [parse_number(v, mode) for v in values]
    return np.array(
        [np.nan if v is None else v for v in parsed],
        dtype=np.float64,
    )
