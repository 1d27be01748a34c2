# Test configuration and fixtures
import os
import shutil
import tempfile
from datetime import datetime
from unittest.mock import Mock

import pytest

# Set test environment variables
os.environ["OLLAMA_BASE_URL"] = "http://localhost:11434"


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files."""
    temp_dir = tempfile.mkdtemp()
    yield temp_dir
    shutil.rmtree(temp_dir)


@pytest.fixture
def mock_llm():
    """Mock LLM wrapper for testing."""
    mock_llm = Mock()
    mock_llm.chat.return_value = "Mock LLM response"
    mock_llm.model = "test-model"
    mock_client = Mock()
    mock_client.host = "http://localhost:11434"
    mock_llm.client = mock_client
    return mock_llm


@pytest.fixture
def test_config():
    """Test configuration."""
    from Timeblocker.agents.config import TimeblockerConfig

    return TimeblockerConfig(
        ollama_host="http://localhost:11434",
        duration_model="duration-model",
        datetime_model="datetime-model",
    )


@pytest.fixture
def fixed_now():
    """Frozen 'now' for prompts that mention today's date."""
    return datetime(2024, 1, 1, 8, 30)


@pytest.fixture
def notices():
    """Collects messages passed to a notify callback."""
    return []


@pytest.fixture
def resolver(mock_llm, test_config, notices, fixed_now):
    """Natural-language resolver wired to the mock LLM."""
    from Timeblocker.agents.time_resolver import NaturalLanguageTimeResolver

    return NaturalLanguageTimeResolver(
        mock_llm, test_config, notify=notices.append, clock=lambda: fixed_now
    )


@pytest.fixture
def scheduler(resolver, notices):
    """Scheduling pipeline using the mocked resolver."""
    from Timeblocker.scheduling.pipeline import Scheduler

    return Scheduler(resolver, notify=notices.append)
