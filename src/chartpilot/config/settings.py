"""Environment-driven defaults for advisor options."""

import logging
from typing import Any, Dict

from dotenv import load_dotenv

from chartpilot.config.env import get_env_int, get_env_list, get_env_str
from chartpilot.models import ChartFormat, ChartOptions

logger = logging.getLogger(__name__)

load_dotenv()

DEFAULT_PREFERRED_FORMAT = ChartFormat.VEGA_LITE.value
DEFAULT_MAX_CHARTS = 5


def get_default_preferred_format() -> str:
    """Return the preferred output format, honouring CHARTPILOT_PREFERRED_FORMAT."""
    value = (get_env_str("CHARTPILOT_PREFERRED_FORMAT", "") or "").strip().lower()
    return value or DEFAULT_PREFERRED_FORMAT


def get_default_max_charts() -> int:
    """Return the chart cap, honouring CHARTPILOT_MAX_CHARTS."""
    try:
        value = get_env_int("CHARTPILOT_MAX_CHARTS", None)
    except ValueError as exc:
        logger.warning("Invalid CHARTPILOT_MAX_CHARTS: %s", exc)
        return DEFAULT_MAX_CHARTS

    if value is None:
        return DEFAULT_MAX_CHARTS
    return max(0, value)


def default_options() -> ChartOptions:
    """Build the option defaults callers' options are merged over."""
    fields: Dict[str, Any] = {
        "preferred_format": get_default_preferred_format(),
        "max_charts": get_default_max_charts(),
    }
    chart_types = get_env_list("CHARTPILOT_CHART_TYPES", None)
    if chart_types:
        fields["chart_types"] = chart_types
    return ChartOptions(**fields)
