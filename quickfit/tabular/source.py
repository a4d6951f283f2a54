"""
Raw text acquisition.

Reads the one file a run works on. Failures surface as
InputAcquisitionError before any parsing happens.
"""

from __future__ import annotations

from pathlib import Path

from quickfit.core.exceptions import InputAcquisitionError

# Decodes UTF-8 and drops a leading byte order mark if present
ENCODING = 'utf-8-sig'


def read_text(path: str | Path) -> str:
    """
    Read a UTF-8 text file, without any leading byte order mark.

    Raises:
        InputAcquisitionError: If the file is missing, unreadable, or not UTF-8
    """
    path = Path(path)
    try:
        return path.read_text(encoding=ENCODING)
    except FileNotFoundError as e:
        raise InputAcquisitionError(
            f"could not read {path}: file not found. "
            f"Check the path and that the file exists in the working directory.",
            path=str(path),
        ) from e
    except UnicodeDecodeError as e:
        raise InputAcquisitionError(
            f"could not read {path}: not valid utf-8 text ({e.reason}). "
            f"Re-save the file as utf-8.",
            path=str(path),
        ) from e
    except OSError as e:
        raise InputAcquisitionError(
            f"could not read {path}: {e.strerror or e}. "
            f"Check file permissions and that the path is a regular file.",
            path=str(path),
        ) from e
