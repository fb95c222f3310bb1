"""Shared datasets for chartpilot tests."""

import pytest


@pytest.fixture
def bar_data():
    return {
        "data": [
            {"category": "A", "value": 10},
            {"category": "B", "value": 20},
            {"category": "C", "value": 15},
        ],
        "columns": [
            {"name": "category", "type": "categorical"},
            {"name": "value", "type": "numeric"},
        ],
    }


@pytest.fixture
def pie_data():
    return {
        "data": [
            {"category": "A", "value": 30},
            {"category": "B", "value": 40},
            {"category": "C", "value": 30},
        ],
        "columns": [
            {"name": "category", "type": "categorical"},
            {"name": "value", "type": "numeric"},
        ],
    }


@pytest.fixture
def time_series_data():
    return {
        "data": [
            {"date": "2024-01", "sales": 100, "profit": 30},
            {"date": "2024-02", "sales": 120, "profit": 35},
            {"date": "2024-03", "sales": 150, "profit": 45},
        ],
        "columns": [
            {"name": "date", "type": "temporal"},
            {"name": "sales", "type": "numeric"},
            {"name": "profit", "type": "numeric"},
        ],
    }


@pytest.fixture
def scatter_data():
    return {
        "data": [
            {"x": 1, "y": 2, "size": 10, "category": "A"},
            {"x": 2, "y": 3, "size": 20, "category": "B"},
            {"x": 3, "y": 4, "size": 15, "category": "A"},
        ],
        "columns": [
            {"name": "x", "type": "numeric"},
            {"name": "y", "type": "numeric"},
            {"name": "size", "type": "numeric"},
            {"name": "category", "type": "categorical"},
        ],
    }


@pytest.fixture
def xy_data():
    return {
        "data": [{"x": 1, "y": 2}, {"x": 4, "y": 3}],
        "columns": [
            {"name": "x", "type": "numeric"},
            {"name": "y", "type": "numeric"},
        ],
    }
