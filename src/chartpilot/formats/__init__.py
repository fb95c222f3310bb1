"""Per-format chart configuration synthesis.

Each target library has one module exposing a ``build_*_config(chart_type,
dataset)`` function. ``SYNTHESIZERS`` maps a format tag to that function;
supporting a new library means adding a module and a registry entry.
"""

from typing import Any, Callable, Dict, Optional

from chartpilot.formats.echarts import build_echarts_config
from chartpilot.formats.plotly import build_plotly_config
from chartpilot.formats.vega_lite import build_vega_lite_config, vega_lite_field_type
from chartpilot.models import ChartFormat, ChartType, Dataset

Synthesizer = Callable[[ChartType, Dataset], Dict[str, Any]]

SYNTHESIZERS: Dict[str, Synthesizer] = {
    ChartFormat.VEGA_LITE.value: build_vega_lite_config,
    ChartFormat.ECHARTS.value: build_echarts_config,
    ChartFormat.PLOTLY.value: build_plotly_config,
}


def get_synthesizer(chart_format: str) -> Optional[Synthesizer]:
    """Return the synthesizer registered for ``chart_format``, or None."""
    return SYNTHESIZERS.get(chart_format)


__all__ = [
    "SYNTHESIZERS",
    "Synthesizer",
    "build_echarts_config",
    "build_plotly_config",
    "build_vega_lite_config",
    "get_synthesizer",
    "vega_lite_field_type",
]
