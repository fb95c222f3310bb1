"""Heuristic chart advice for tabular datasets.

Given column metadata and rows, chartpilot picks a chart type (bar, line,
scatter, point or pie) and renders a declarative configuration for
Vega-Lite, ECharts or Plotly.

Design Notes:
-------------
  - Inference is a pure function of the column schema; only the pie/bar
    decision reads row values (numeric values summing to 100 read as
    percentages).
  - One synthesizer per target library, dispatched through a lookup table.
  - No rendering, data loading or schema validation beyond presence checks.
"""

from chartpilot.advisor import ChartAdvisor
from chartpilot.errors import (
    ChartPilotError,
    DatasetRequiredError,
    ErrorCode,
    InputValidationError,
    InvalidColumnsError,
    InvalidOptionsError,
    InvalidRowsError,
)
from chartpilot.inference import detect_chart_type
from chartpilot.models import (
    ChartConfiguration,
    ChartFormat,
    ChartOptions,
    ChartType,
    ColumnDescriptor,
    ColumnKind,
    Dataset,
)

__all__ = [
    "ChartAdvisor",
    "ChartConfiguration",
    "ChartFormat",
    "ChartOptions",
    "ChartPilotError",
    "ChartType",
    "ColumnDescriptor",
    "ColumnKind",
    "Dataset",
    "DatasetRequiredError",
    "ErrorCode",
    "InputValidationError",
    "InvalidColumnsError",
    "InvalidOptionsError",
    "InvalidRowsError",
    "detect_chart_type",
]
