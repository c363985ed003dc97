"""Shared test fixtures for the function handlers."""

import sys
from pathlib import Path

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


@pytest.fixture(autouse=True)
def _clear_caches():
    """Config and logging are cached per process; reset them around every test."""
    from core.config import _reset_config
    from core.log import _reset_logging

    _reset_config()
    _reset_logging()
    yield
    _reset_config()
    _reset_logging()


@pytest.fixture
def lambda_context():
    class _Context:
        aws_request_id = "req-123"
        function_name = "test-function"

    return _Context()
