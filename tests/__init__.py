#!/usr/bin/env python3
"""
Test suite for the scoring engines.

All tests can be run with standard Python tools:

    # Run all tests
    python -m pytest tests/ -v

    # Using unittest
    python -m unittest discover tests -v

Fixtures and record factories live in tests/fixtures/record_fixtures.py.
"""
