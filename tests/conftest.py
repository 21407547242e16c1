"""Pytest configuration and fixtures."""

from unittest.mock import AsyncMock

import pytest

from novaroute.config.schema import ClassifierConfig
from novaroute.providers.completion import CompletionError, CompletionService


@pytest.fixture
def classifier_config():
    """Provide classifier config fixture."""
    return ClassifierConfig()


@pytest.fixture
def completion():
    """Completion service mock that answers CHAT unless told otherwise."""
    service = AsyncMock(spec=CompletionService)
    service.complete.return_value = "CHAT"
    return service


@pytest.fixture
def failing_completion():
    """Completion service mock that always fails."""
    service = AsyncMock(spec=CompletionService)
    service.complete.side_effect = CompletionError("no provider available")
    return service
