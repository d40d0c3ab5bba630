"""Shared pytest configuration."""

import logging

import pytest
import structlog


@pytest.fixture(autouse=True)
def _quiet_structlog():
    """Keep library debug logs off stdout unless a test configures logging."""
    structlog.reset_defaults()
    structlog.configure(
        wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING),
    )
    yield
    structlog.reset_defaults()
