"""Unit tests for chart type inference."""

from decimal import Decimal

import pytest

from chartpilot.inference import (
    ColumnRoles,
    column_values,
    detect_chart_type,
    find_column,
    first_of_kind,
)
from chartpilot.models import ChartType, ColumnDescriptor, ColumnKind, Dataset


def _columns(*pairs):
    return [ColumnDescriptor(name=name, kind=kind) for name, kind in pairs]


def test_categorical_and_numeric_defaults_to_bar(bar_data):
    """Values that do not sum to 100 produce a bar chart."""
    dataset = Dataset.model_validate(bar_data)
    assert detect_chart_type(dataset.columns, dataset.rows) == ChartType.BAR


def test_proportional_values_produce_pie(pie_data):
    """Values summing to 100 are read as percentages."""
    dataset = Dataset.model_validate(pie_data)
    assert detect_chart_type(dataset.columns, dataset.rows) == ChartType.PIE


@pytest.mark.parametrize(
    "values, expected",
    [
        ([33.33, 33.33, 33.335], ChartType.PIE),
        ([50.0, 49.995], ChartType.PIE),
        ([50.0, 49.9], ChartType.BAR),
        ([50.0, 50.02], ChartType.BAR),
        ([60, 50], ChartType.BAR),
    ],
)
def test_pie_tolerance(values, expected):
    """The pie rule accepts totals strictly within 0.01 of 100."""
    columns = _columns(("label", "categorical"), ("share", "numeric"))
    rows = [{"label": str(i), "share": v} for i, v in enumerate(values)]
    assert detect_chart_type(columns, rows) == expected


def test_temporal_with_two_numerics_is_line(time_series_data):
    dataset = Dataset.model_validate(time_series_data)
    assert detect_chart_type(dataset.columns, dataset.rows) == ChartType.LINE


def test_temporal_with_single_numeric_is_not_line():
    """One numeric series over time falls through to the bar default."""
    columns = _columns(("date", "temporal"), ("sales", "numeric"))
    rows = [{"date": "2024-01", "sales": 1}]
    assert detect_chart_type(columns, rows) == ChartType.BAR


def test_xy_with_size_is_point(scatter_data):
    dataset = Dataset.model_validate(scatter_data)
    assert detect_chart_type(dataset.columns, dataset.rows) == ChartType.POINT


def test_xy_without_size_is_scatter(xy_data):
    dataset = Dataset.model_validate(xy_data)
    assert detect_chart_type(dataset.columns, dataset.rows) == ChartType.SCATTER


def test_xy_requires_numeric_kind():
    """Columns named x/y only count when numeric."""
    columns = _columns(("x", "categorical"), ("y", "numeric"))
    rows = [{"x": "a", "y": 30}, {"x": "b", "y": 70}]
    assert detect_chart_type(columns, rows) == ChartType.PIE


def test_non_numeric_size_gives_scatter():
    columns = _columns(("x", "numeric"), ("y", "numeric"), ("size", "ordinal"))
    assert detect_chart_type(columns, []) == ChartType.SCATTER


def test_line_takes_precedence_over_scatter():
    """Rule order is precedence: temporal + numerics wins over x/y."""
    columns = _columns(("t", "temporal"), ("x", "numeric"), ("y", "numeric"))
    assert detect_chart_type(columns, []) == ChartType.LINE


def test_empty_rows_sum_to_zero():
    columns = _columns(("category", "categorical"), ("value", "numeric"))
    assert detect_chart_type(columns, []) == ChartType.BAR


def test_no_columns_falls_back_to_bar():
    assert detect_chart_type([], []) == ChartType.BAR


def test_unknown_kind_is_ignored():
    columns = _columns(("category", "categorical"), ("value", "currency"))
    assert detect_chart_type(columns, [{"category": "A", "value": 100}]) == ChartType.BAR


def test_missing_value_raises_key_error():
    """A row without the numeric column surfaces as a fault."""
    columns = _columns(("category", "categorical"), ("value", "numeric"))
    with pytest.raises(KeyError):
        detect_chart_type(columns, [{"category": "A"}])


def test_non_numeric_value_raises_type_error():
    columns = _columns(("category", "categorical"), ("value", "numeric"))
    with pytest.raises(TypeError):
        detect_chart_type(columns, [{"category": "A", "value": "50"}])


def test_column_roles(scatter_data):
    dataset = Dataset.model_validate(scatter_data)
    roles = ColumnRoles.from_columns(dataset.columns)

    assert roles.x.name == "x"
    assert roles.y.name == "y"
    assert roles.size.name == "size"
    assert roles.category.name == "category"
    assert roles.temporal is None
    assert roles.value.name == "x"
    assert [col.name for col in roles.numerics] == ["x", "y", "size"]


def test_column_lookup_helpers():
    columns = _columns(("a", "ordinal"), ("b", "numeric"), ("a", "numeric"))

    assert first_of_kind(columns, ColumnKind.TEMPORAL) is None
    assert find_column(columns, "a").kind == "ordinal"
    assert find_column(columns, "a", ColumnKind.NUMERIC).kind == "numeric"
    assert find_column(columns, "missing") is None


def test_column_values_handles_absent_column():
    rows = [{"a": 1}, {"b": 2}]
    column = ColumnDescriptor(name="a", kind="numeric")

    assert column_values(rows, column) == [1, None]
    assert column_values(rows, None) == [None, None]


def test_decimal_shares_produce_pie():
    """Database rows often carry Decimal values."""
    columns = _columns(("category", "categorical"), ("value", "numeric"))
    rows = [{"category": "A", "value": Decimal("30")}, {"category": "B", "value": Decimal("70")}]
    assert detect_chart_type(columns, rows) == ChartType.PIE


def test_mixed_decimal_and_float_shares():
    columns = _columns(("category", "categorical"), ("value", "numeric"))
    rows = [{"category": "A", "value": Decimal("30.5")}, {"category": "B", "value": 69.5}]
    assert detect_chart_type(columns, rows) == ChartType.PIE


def test_null_share_counts_as_zero():
    columns = _columns(("category", "categorical"), ("value", "numeric"))
    rows = [
        {"category": "A", "value": 60},
        {"category": "B", "value": 40},
        {"category": "C", "value": None},
    ]
    assert detect_chart_type(columns, rows) == ChartType.PIE
