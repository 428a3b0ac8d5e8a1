"""
Pytest configuration and fixtures.

This file provides pytest-specific fixtures shared by the unit tests.
For record factories, see tests/fixtures/record_fixtures.py
"""

import logging

import pytest

from tests.fixtures.record_fixtures import REFERENCE_NOW, SAMPLE_REPORT_RECORDS


@pytest.fixture
def reference_now():
    return REFERENCE_NOW


@pytest.fixture
def sample_report_records():
    """Raw report dicts as they arrive from the data store."""
    return [dict(record) for record in SAMPLE_REPORT_RECORDS]


@pytest.fixture(autouse=True)
def _quiet_logging(caplog):
    caplog.set_level(logging.WARNING)
    yield
