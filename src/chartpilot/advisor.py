"""Chart advisor: infer a chart type and emit a target-library configuration."""

import logging
from typing import Any, List, Mapping, Optional, Union

from pydantic import ValidationError

from chartpilot.config.settings import default_options
from chartpilot.errors import (
    DatasetRequiredError,
    ErrorCode,
    InvalidColumnsError,
    InvalidOptionsError,
    InvalidRowsError,
    error_code_group,
)
from chartpilot.formats import get_synthesizer
from chartpilot.inference import detect_chart_type
from chartpilot.models import ChartConfiguration, ChartFormat, ChartOptions, ChartType, Dataset
from chartpilot.tracing import trace_generation

logger = logging.getLogger(__name__)

DatasetInput = Union[Dataset, Mapping[str, Any]]
OptionsInput = Union[ChartOptions, Mapping[str, Any]]

_SEQUENCE_TYPES = (list, tuple)


def _field(source: Any, *names: str) -> Any:
    for name in names:
        if isinstance(source, Mapping):
            if name in source:
                return source[name]
        elif hasattr(source, name):
            return getattr(source, name)
    return None


def _coerce_dataset(dataset: Optional[DatasetInput]) -> Dataset:
    if dataset is None:
        raise DatasetRequiredError("Dataset is required")
    if isinstance(dataset, Dataset):
        return dataset

    columns = _field(dataset, "columns")
    if not isinstance(columns, _SEQUENCE_TYPES):
        raise InvalidColumnsError("Dataset must have a columns sequence")

    rows = _field(dataset, "data", "rows")
    if not isinstance(rows, _SEQUENCE_TYPES):
        raise InvalidRowsError("Dataset must have a data sequence")

    try:
        return Dataset(columns=list(columns), rows=list(rows))
    except ValidationError as exc:
        raise InvalidColumnsError(f"Dataset columns could not be read: {exc}") from exc


def _merge_options(options: Optional[OptionsInput]) -> ChartOptions:
    defaults = default_options()
    if options is None:
        return defaults
    if not isinstance(options, ChartOptions):
        try:
            options = ChartOptions.model_validate(dict(options))
        except (TypeError, ValueError) as exc:
            raise InvalidOptionsError(f"Chart options could not be read: {exc}") from exc
    return defaults.model_copy(update=options.model_dump(exclude_unset=True))


class ChartAdvisor:
    """Suggest a chart for a dataset and render its configuration.

    Construction only checks that the dataset exists and that its columns and
    rows are sequences. ``generate()`` infers the chart type and returns one
    configuration for the preferred format.

    Example:
        >>> advisor = ChartAdvisor(
        ...     {
        ...         "columns": [
        ...             {"name": "category", "type": "categorical"},
        ...             {"name": "value", "type": "numeric"},
        ...         ],
        ...         "data": [{"category": "A", "value": 10}],
        ...     },
        ...     {"preferredFormat": "echarts"},
        ... )
        >>> advisor.generate()[0].config["series"][0]["type"]
        'bar'
    """

    def __init__(self, dataset: Optional[DatasetInput], options: Optional[OptionsInput] = None):
        """Validate the dataset and merge options over the environment defaults."""
        self._dataset = _coerce_dataset(dataset)
        self._options = _merge_options(options)

    @property
    def dataset(self) -> Dataset:
        return self._dataset

    @property
    def options(self) -> ChartOptions:
        return self._options

    def detect_chart_type(self) -> ChartType:
        """Infer the chart type, logging the dataset state before re-raising faults."""
        try:
            return detect_chart_type(self._dataset.columns, self._dataset.rows)
        except Exception:
            self._log_fault("Chart type detection", ErrorCode.INFERENCE_ERROR)
            raise

    def _log_fault(self, stage: str, code: ErrorCode) -> None:
        logger.exception(
            "%s failed (error_code=%s, error_group=%s). Dataset state: %s",
            stage,
            code.value,
            error_code_group(code),
            self._dataset.model_dump(by_alias=True),
        )

    def generate(self) -> List[ChartConfiguration]:
        """Return a single configuration for the preferred format.

        An unrecognized format yields an empty list.
        """
        chart_format = self._options.preferred_format
        synthesizer = get_synthesizer(chart_format)
        if synthesizer is None:
            logger.warning(
                "No chart generated for unsupported format '%s' (error_code=%s)",
                chart_format,
                ErrorCode.UNSUPPORTED_FORMAT.value,
            )
            return []

        with trace_generation(
            chart_format, len(self._dataset.rows), len(self._dataset.columns)
        ) as span:
            chart_type = self.detect_chart_type()
            if span is not None:
                span.set_attribute("chartpilot.chart_type", chart_type.value)
            try:
                config = synthesizer(chart_type, self._dataset)
            except Exception:
                self._log_fault(f"{chart_format} synthesis", ErrorCode.INTERNAL_ERROR)
                raise

        logger.info("Generated %s %s chart configuration", chart_format, chart_type.value)
        return [
            ChartConfiguration(format=ChartFormat(chart_format), chart_type=chart_type, config=config)
        ]
