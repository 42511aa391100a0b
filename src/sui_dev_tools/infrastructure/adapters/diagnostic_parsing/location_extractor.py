"""
Recognizes the source-location line of a rendered Move diagnostic.

The renderer marks the position with a box-drawing prefix, e.g.

    ┌─ sources/counter.move:10:5
"""
from typing import Optional

from sui_dev_tools.domain.models.diagnostics import DiagnosticLocation

LOCATION_MARKER = "┌─"

_U32_MAX = 2 ** 32 - 1


def _parse_u32(value: str) -> Optional[int]:
    if not value or not value.isascii() or not value.isdigit():
        return None
    number = int(value)
    if number > _U32_MAX:
        return None
    return number


def extract_location(line: str) -> Optional[DiagnosticLocation]:
    """
    Decompose a location marker line into file, line and column.

    Returns None for anything that is not a well-formed marker line. Shortened
    or wrapped location lines are expected from the renderer and must not
    abort the parse.
    """
    if not line.lstrip().startswith(LOCATION_MARKER):
        return None

    parts = line.split(":")
    if len(parts) < 3:
        return None

    line_number = _parse_u32(parts[1])
    column_number = _parse_u32(parts[2])
    if line_number is None or column_number is None:
        return None

    path = parts[0].replace(LOCATION_MARKER, "").strip()
    return DiagnosticLocation(file=path, line=line_number, column=column_number)
