"""ECharts option synthesis."""

from typing import Any, Callable, Dict, Sequence

from chartpilot.inference import ColumnRoles, column_values
from chartpilot.models import ChartType, Dataset

DEFAULT_SYMBOL_SIZE = 10
DEFAULT_POINT_COLOR = "#5470c6"


def _line(roles: ColumnRoles, rows: Sequence[Any]) -> Dict[str, Any]:
    return {
        "xAxis": {"type": "category", "data": column_values(rows, roles.temporal)},
        "yAxis": {"type": "value"},
        "series": [
            {"name": col.name, "type": "line", "data": column_values(rows, col)}
            for col in roles.numerics
        ],
    }


def _scatter(roles: ColumnRoles, rows: Sequence[Any]) -> Dict[str, Any]:
    xs = column_values(rows, roles.x)
    ys = column_values(rows, roles.y)
    if roles.size is not None:
        sizes = column_values(rows, roles.size)
    else:
        sizes = [DEFAULT_SYMBOL_SIZE for _ in rows]
    item_style = {} if roles.category is not None else {"color": DEFAULT_POINT_COLOR}

    points = [
        {"value": [x, y], "symbolSize": size, "itemStyle": dict(item_style)}
        for x, y, size in zip(xs, ys, sizes)
    ]
    return {
        "xAxis": {"type": "value", "name": roles.x.name if roles.x else None},
        "yAxis": {"type": "value", "name": roles.y.name if roles.y else None},
        "series": [{"type": "scatter", "data": points}],
    }


def _pie(roles: ColumnRoles, rows: Sequence[Any]) -> Dict[str, Any]:
    names = column_values(rows, roles.category)
    values = column_values(rows, roles.value)
    return {
        "series": [
            {
                "type": "pie",
                "data": [{"name": name, "value": value} for name, value in zip(names, values)],
            }
        ]
    }


def _bar(roles: ColumnRoles, rows: Sequence[Any]) -> Dict[str, Any]:
    return {
        "xAxis": {"type": "category", "data": column_values(rows, roles.category)},
        "yAxis": {"type": "value"},
        "series": [{"type": "bar", "data": column_values(rows, roles.value)}],
    }


_BUILDERS: Dict[ChartType, Callable[[ColumnRoles, Sequence[Any]], Dict[str, Any]]] = {
    ChartType.LINE: _line,
    ChartType.SCATTER: _scatter,
    ChartType.POINT: _scatter,
    ChartType.PIE: _pie,
    ChartType.BAR: _bar,
}


def build_echarts_config(chart_type: ChartType, dataset: Dataset) -> Dict[str, Any]:
    """Build an ECharts option object for ``chart_type``."""
    roles = ColumnRoles.from_columns(dataset.columns)
    return _BUILDERS[chart_type](roles, dataset.rows)
