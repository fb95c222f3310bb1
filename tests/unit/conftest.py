"""Unit test environment helpers."""

import pytest

_ISOLATED_ENV_VARS = (
    "CHARTPILOT_PREFERRED_FORMAT",
    "CHARTPILOT_MAX_CHARTS",
    "CHARTPILOT_CHART_TYPES",
    "CHARTPILOT_TRACE_GENERATION",
    "OTEL_DISABLE_EXPORTER",
    "OTEL_EXPORTER_OTLP_ENDPOINT",
    "OTEL_EXPORTER_OTLP_TRACES_ENDPOINT",
)


@pytest.fixture(autouse=True)
def _minimal_env(monkeypatch):
    """Clear chartpilot and OTEL settings so defaults apply unless a test opts in."""
    for name in _ISOLATED_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    yield
