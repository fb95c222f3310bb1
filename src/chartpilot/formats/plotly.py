"""Plotly figure synthesis.

Output is a plain ``{"data": [...traces], "layout": {}}`` figure dict, ready
for ``Plotly.newPlot`` or ``plotly.graph_objects.Figure``.
"""

from typing import Any, Callable, Dict, List, Sequence

from chartpilot.inference import ColumnRoles, column_values
from chartpilot.models import ChartType, Dataset

DEFAULT_MARKER_SIZE = 10

Trace = Dict[str, Any]


def _line(roles: ColumnRoles, rows: Sequence[Any]) -> List[Trace]:
    x = column_values(rows, roles.temporal)
    return [
        {
            "x": list(x),
            "y": column_values(rows, col),
            "type": "scatter",
            "mode": "lines",
            "name": col.name,
        }
        for col in roles.numerics
    ]


def _scatter(roles: ColumnRoles, rows: Sequence[Any]) -> List[Trace]:
    if roles.size is not None:
        size: Any = column_values(rows, roles.size)
    else:
        size = DEFAULT_MARKER_SIZE
    return [
        {
            "x": column_values(rows, roles.x),
            "y": column_values(rows, roles.y),
            "mode": "markers",
            "type": "scatter",
            "marker": {"size": size},
        }
    ]


def _pie(roles: ColumnRoles, rows: Sequence[Any]) -> List[Trace]:
    return [
        {
            "values": column_values(rows, roles.value),
            "labels": column_values(rows, roles.category),
            "type": "pie",
        }
    ]


def _bar(roles: ColumnRoles, rows: Sequence[Any]) -> List[Trace]:
    return [
        {
            "x": column_values(rows, roles.category),
            "y": column_values(rows, roles.value),
            "type": "bar",
        }
    ]


_BUILDERS: Dict[ChartType, Callable[[ColumnRoles, Sequence[Any]], List[Trace]]] = {
    ChartType.LINE: _line,
    ChartType.SCATTER: _scatter,
    ChartType.POINT: _scatter,
    ChartType.PIE: _pie,
    ChartType.BAR: _bar,
}


def build_plotly_config(chart_type: ChartType, dataset: Dataset) -> Dict[str, Any]:
    """Build a Plotly figure dict for ``chart_type``."""
    roles = ColumnRoles.from_columns(dataset.columns)
    return {"data": _BUILDERS[chart_type](roles, dataset.rows), "layout": {}}
