"""Vega-Lite specification synthesis.

Every chart is a single-view spec with the rows inlined under ``data.values``.
Multi-series line charts fold the numeric columns into a long
``metric``/``value`` pair and color by ``metric``.
"""

from typing import Any, Callable, Dict, Optional

from chartpilot.inference import ColumnRoles
from chartpilot.models import ChartType, ColumnDescriptor, ColumnKind, Dataset

VEGA_LITE_SCHEMA = "https://vega.github.io/schema/vega-lite/v5.json"

_FIELD_TYPES = {
    ColumnKind.NUMERIC.value: "quantitative",
    ColumnKind.CATEGORICAL.value: "nominal",
    ColumnKind.TEMPORAL.value: "temporal",
    ColumnKind.ORDINAL.value: "ordinal",
}

_MARKS = {ChartType.PIE: "arc"}


def vega_lite_field_type(kind: str) -> str:
    """Map a column kind to its Vega-Lite field type (default nominal)."""
    return _FIELD_TYPES.get(kind, "nominal")


def _channel(
    column: Optional[ColumnDescriptor],
    default_type: str,
    titled: bool = True,
    typed_by_kind: bool = True,
) -> Dict[str, Any]:
    if column is None:
        return {"type": default_type}
    field_type = vega_lite_field_type(column.kind) if typed_by_kind else default_type
    channel: Dict[str, Any] = {"field": column.name, "type": field_type}
    if titled:
        channel["axis"] = {"title": column.name}
    return channel


def _line(roles: ColumnRoles) -> Dict[str, Any]:
    spec: Dict[str, Any] = {
        "encoding": {
            "x": _channel(roles.temporal, "temporal"),
            "y": _channel(roles.value, "quantitative"),
        }
    }
    if len(roles.numerics) > 1:
        spec["transform"] = [
            {"fold": [col.name for col in roles.numerics], "as": ["metric", "value"]}
        ]
        spec["encoding"]["y"]["field"] = "value"
        spec["encoding"]["color"] = {"field": "metric", "type": "nominal"}
    return spec


def _scatter(roles: ColumnRoles) -> Dict[str, Any]:
    encoding = {
        "x": _channel(roles.x, "quantitative", typed_by_kind=False),
        "y": _channel(roles.y, "quantitative", typed_by_kind=False),
    }
    if roles.size is not None:
        encoding["size"] = _channel(
            roles.size, "quantitative", titled=False, typed_by_kind=False
        )
    if roles.category is not None:
        encoding["color"] = _channel(roles.category, "nominal", titled=False)
    return {"encoding": encoding}


def _pie(roles: ColumnRoles) -> Dict[str, Any]:
    theta = _channel(roles.value, "quantitative", titled=False)
    theta["stack"] = True
    return {
        "encoding": {
            "theta": theta,
            "color": _channel(roles.category, "nominal", titled=False),
        }
    }


def _bar(roles: ColumnRoles) -> Dict[str, Any]:
    return {
        "encoding": {
            "x": _channel(roles.category, "nominal"),
            "y": _channel(roles.value, "quantitative"),
        }
    }


_BUILDERS: Dict[ChartType, Callable[[ColumnRoles], Dict[str, Any]]] = {
    ChartType.LINE: _line,
    ChartType.SCATTER: _scatter,
    ChartType.POINT: _scatter,
    ChartType.PIE: _pie,
    ChartType.BAR: _bar,
}


def build_vega_lite_config(chart_type: ChartType, dataset: Dataset) -> Dict[str, Any]:
    """Build a Vega-Lite specification for ``chart_type``."""
    spec: Dict[str, Any] = {
        "$schema": VEGA_LITE_SCHEMA,
        "data": {"values": [dict(row) for row in dataset.rows]},
        "mark": _MARKS.get(chart_type, chart_type.value),
    }
    spec.update(_BUILDERS[chart_type](ColumnRoles.from_columns(dataset.columns)))
    return spec
