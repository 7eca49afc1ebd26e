"""CSV export for homogeneous record collections.

Cells are joined with bare commas: values containing commas, quotes or
newlines are written as-is and will not survive a round trip through a
CSV parser. This is not a general CSV encoder.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Mapping, Sequence
from typing import Any


def _as_mapping(record: Any) -> Mapping[str, Any]:
    if isinstance(record, Mapping):
        return record
    if dataclasses.is_dataclass(record) and not isinstance(record, type):
        return {f.name: getattr(record, f.name) for f in dataclasses.fields(record)}
    raise TypeError(f"Cannot export {type(record).__name__}: expected a dataclass instance or a mapping")


def _cell(value: Any) -> str:
    return "" if value is None else str(value)


def to_csv(records: Sequence[Any]) -> str:
    """Serialize records to CSV text.

    The header is the first record's field names in declaration order; each
    following row holds one record's values in header order. Rows are
    separated by ``\\n`` with no trailing newline. An empty sequence gives
    an empty string.
    """
    rows = [_as_mapping(r) for r in records]
    header = list(rows[0].keys()) if rows else []

    lines = [",".join(header)]
    for row in rows:
        lines.append(",".join(_cell(row.get(name)) for name in header))
    return "\n".join(lines)
