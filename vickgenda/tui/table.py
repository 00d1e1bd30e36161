"""Plain-text table rendering with aligned columns."""

from __future__ import annotations

import warnings
from collections.abc import Sequence


def render_table(headers: Sequence[str], rows: Sequence[Sequence[str]]) -> str:
    """Render headers and rows as a '|'-separated table padded to the widest cell.

    Rows whose length differs from the headers are skipped with a warning.
    An empty header list gives an empty string.
    """
    if not headers:
        return ""

    valid_rows = []
    for row in rows:
        if len(row) != len(headers):
            warnings.warn(
                f"row length does not match header length, skipping row: {list(row)}",
                stacklevel=2,
            )
            continue
        valid_rows.append(row)

    widths = [
        max(len(cell) for cell in column)
        for column in zip(headers, *valid_rows)
    ]

    def line(cells: Sequence[str]) -> str:
        return "|" + "".join(f" {cell.ljust(width)} |" for cell, width in zip(cells, widths))

    separator = "|" + "".join("-" * (width + 2) + "|" for width in widths)
    lines = [line(headers), separator, *(line(row) for row in valid_rows)]
    return "".join(f"{text}\n" for text in lines)