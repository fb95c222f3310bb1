"""Chart type inference from column metadata.

Rules are checked in order and the first match wins:

  1. temporal column and more than one numeric column -> line
  2. numeric ``x`` and ``y`` columns -> point (with numeric ``size``) or scatter
  3. categorical column and exactly one numeric column -> pie when the numeric
     values sum to 100 (percentages), otherwise bar
  4. anything else -> bar
"""

from dataclasses import dataclass
from numbers import Number
from typing import Any, List, Mapping, Optional, Sequence

from chartpilot.models import ChartType, ColumnDescriptor, ColumnKind

PIE_TOTAL = 100.0
PIE_TOLERANCE = 0.01


def columns_of_kind(
    columns: Sequence[ColumnDescriptor], kind: ColumnKind
) -> List[ColumnDescriptor]:
    """Return every column of ``kind`` in schema order."""
    return [col for col in columns if col.is_kind(kind)]


def first_of_kind(
    columns: Sequence[ColumnDescriptor], kind: ColumnKind
) -> Optional[ColumnDescriptor]:
    """Return the first column of ``kind``, or None."""
    return next((col for col in columns if col.is_kind(kind)), None)


def find_column(
    columns: Sequence[ColumnDescriptor], name: str, kind: Optional[ColumnKind] = None
) -> Optional[ColumnDescriptor]:
    """Return the first column called ``name`` (optionally of ``kind``), or None."""
    for col in columns:
        if col.name == name and (kind is None or col.is_kind(kind)):
            return col
    return None


@dataclass(frozen=True)
class ColumnRoles:
    """Columns playing each encoding role for a dataset."""

    temporal: Optional[ColumnDescriptor]
    category: Optional[ColumnDescriptor]
    value: Optional[ColumnDescriptor]
    numerics: List[ColumnDescriptor]
    x: Optional[ColumnDescriptor]
    y: Optional[ColumnDescriptor]
    size: Optional[ColumnDescriptor]

    @classmethod
    def from_columns(cls, columns: Sequence[ColumnDescriptor]) -> "ColumnRoles":
        numerics = columns_of_kind(columns, ColumnKind.NUMERIC)
        return cls(
            temporal=first_of_kind(columns, ColumnKind.TEMPORAL),
            category=first_of_kind(columns, ColumnKind.CATEGORICAL),
            value=numerics[0] if numerics else None,
            numerics=numerics,
            x=find_column(columns, "x"),
            y=find_column(columns, "y"),
            size=find_column(columns, "size"),
        )


def column_values(rows: Sequence[Any], column: Optional[ColumnDescriptor]) -> List[Any]:
    """Return the value of ``column`` for each row; None where the column is absent."""
    if column is None:
        return [None for _ in rows]
    return [row.get(column.name) for row in rows]


def _share(value: Any) -> float:
    if value is None:
        return 0.0
    if isinstance(value, Number):
        return float(value)
    raise TypeError(f"Expected a numeric value, got {type(value).__name__}: {value!r}")


def _is_proportional(rows: Sequence[Mapping[str, Any]], column: ColumnDescriptor) -> bool:
    total = sum(_share(row[column.name]) for row in rows)
    return abs(total - PIE_TOTAL) < PIE_TOLERANCE


def detect_chart_type(
    columns: Sequence[ColumnDescriptor], rows: Sequence[Mapping[str, Any]]
) -> ChartType:
    """Infer the chart type for a dataset.

    Only the pie/bar decision reads row values. Nulls count as 0. A row
    missing the numeric column raises ``KeyError``; a non-numeric value there
    raises ``TypeError``.
    """
    numerics = columns_of_kind(columns, ColumnKind.NUMERIC)
    has_temporal = first_of_kind(columns, ColumnKind.TEMPORAL) is not None
    has_category = first_of_kind(columns, ColumnKind.CATEGORICAL) is not None

    if has_temporal and len(numerics) > 1:
        return ChartType.LINE

    x_col = find_column(columns, "x", ColumnKind.NUMERIC)
    y_col = find_column(columns, "y", ColumnKind.NUMERIC)
    if x_col is not None and y_col is not None:
        if find_column(columns, "size", ColumnKind.NUMERIC) is not None:
            return ChartType.POINT
        return ChartType.SCATTER

    if has_category and len(numerics) == 1:
        return ChartType.PIE if _is_proportional(rows, numerics[0]) else ChartType.BAR

    return ChartType.BAR
