"""Value objects shared by inference and synthesis."""

from __future__ import annotations

from enum import Enum
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class ColumnKind(str, Enum):
    """Semantic type tag of a dataset column."""

    NUMERIC = "numeric"
    CATEGORICAL = "categorical"
    TEMPORAL = "temporal"
    ORDINAL = "ordinal"


class ChartType(str, Enum):
    """Chart types the advisor can infer."""

    BAR = "bar"
    LINE = "line"
    SCATTER = "scatter"
    POINT = "point"
    PIE = "pie"


class ChartFormat(str, Enum):
    """Target rendering libraries."""

    VEGA_LITE = "vega-lite"
    ECHARTS = "echarts"
    PLOTLY = "plotly"


def _enum_value(value: Any) -> Any:
    return value.value if isinstance(value, Enum) else value


class ColumnDescriptor(BaseModel):
    """Metadata for a single dataset column.

    ``kind`` is also read from ``type``, the key used by JavaScript callers.
    Unknown kinds are kept as-is; they never match an inference rule.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str
    kind: str = Field(..., alias="type")
    description: Optional[str] = None

    @field_validator("kind", mode="before")
    @classmethod
    def _unwrap_kind(cls, value: Any) -> Any:
        return _enum_value(value)

    def is_kind(self, kind: ColumnKind) -> bool:
        return self.kind == kind.value


class Dataset(BaseModel):
    """Column schema plus row records.

    Rows are not validated; inference and synthesis read them by column name.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    columns: List[ColumnDescriptor]
    rows: List[Any] = Field(..., alias="data")


class ChartOptions(BaseModel):
    """Caller options for the advisor.

    ``max_charts`` and ``chart_types`` are accepted for API compatibility but do
    not influence generation.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    preferred_format: str = Field(ChartFormat.VEGA_LITE.value, alias="preferredFormat")
    max_charts: int = Field(5, alias="maxCharts")
    chart_types: Optional[List[str]] = Field(None, alias="chartTypes")

    @field_validator("preferred_format", mode="before")
    @classmethod
    def _unwrap_format(cls, value: Any) -> Any:
        return _enum_value(value)

    @field_validator("chart_types", mode="before")
    @classmethod
    def _unwrap_chart_types(cls, value: Any) -> Any:
        if value is None:
            return None
        return [_enum_value(item) for item in value]


class ChartConfiguration(BaseModel):
    """One configuration object for a target rendering library."""

    model_config = ConfigDict(frozen=True)

    format: ChartFormat
    chart_type: ChartType
    config: Dict[str, Any]

    def to_dict(self) -> Dict[str, Any]:
        """Return the ``{"type", "config"}`` shape consumed by rendering layers."""
        return {"type": self.format.value, "config": self.config}
