"""
Pytest configuration and shared fixtures for the filetranslate test suite.
"""
import os
import sys
import json
import shutil
import logging
import tempfile
from pathlib import Path
from typing import Generator, Dict, Any, Optional
from unittest.mock import Mock, patch

import pytest

# Add the project root to Python path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from filetranslate.config import PipelineConfig, ENV_PREFIX


# Test data constants
SAMPLE_TEXT = "Привет, мир"
SAMPLE_TRANSLATION = "hello"
SAMPLE_API_KEY = "test_api_key_0123456789"
SAMPLE_RESPONSE = {"translations": [{"text": SAMPLE_TRANSLATION}]}


@pytest.fixture(scope="function")
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test isolation."""
    temp_path = Path(tempfile.mkdtemp(prefix="filetranslate_test_"))
    yield temp_path
    # Cleanup
    if temp_path.exists():
        shutil.rmtree(temp_path)


@pytest.fixture(scope="function")
def input_file(temp_dir: Path) -> Path:
    """Input file holding SAMPLE_TEXT."""
    path = temp_dir / "input.txt"
    path.write_text(SAMPLE_TEXT, encoding="utf-8")
    return path


@pytest.fixture(scope="function")
def pipeline_config(temp_dir: Path, input_file: Path) -> PipelineConfig:
    """Pipeline config pointing at files in the temp directory."""
    return PipelineConfig(
        api_key=SAMPLE_API_KEY,
        input_path=input_file,
        output_path=temp_dir / "output.txt",
        timeout=5.0,
    )


@pytest.fixture(scope="function")
def mock_env_vars(monkeypatch) -> Dict[str, str]:
    """Mock environment variables for testing."""
    test_env = {
        f"{ENV_PREFIX}API_KEY": SAMPLE_API_KEY,
        f"{ENV_PREFIX}TARGET_LANGUAGE": "en",
    }
    for key, value in test_env.items():
        monkeypatch.setenv(key, value)
    return test_env


@pytest.fixture(scope="function")
def mock_api_response():
    """Factory for mock requests.Response objects."""
    return create_mock_api_response


@pytest.fixture(scope="function")
def capture_logs(caplog):
    """Fixture to capture and assert on log messages."""
    with caplog.at_level("INFO"):
        yield caplog


@pytest.fixture(autouse=True)
def clean_env():
    """Hide TRANSLATE_* variables from the host and undo anything a test loads."""
    with patch.dict(os.environ):
        for key in list(os.environ):
            if key.startswith(ENV_PREFIX):
                del os.environ[key]
        yield


@pytest.fixture(autouse=True)
def reset_loggers():
    """Drop handlers the CLI attaches so they do not outlive the test's streams."""
    yield
    logger = logging.getLogger("filetranslate")
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()
    logger.setLevel(logging.NOTSET)


# Helper functions for tests

def create_mock_api_response(status_code: int = 200,
                             json_data: Optional[Any] = None,
                             text: Optional[str] = None):
    """Create a mock API response object.

    Without json_data, response.json() raises ValueError like requests does
    for a non-JSON body.
    """
    response = Mock()
    response.status_code = status_code
    response.ok = status_code < 400
    if json_data is None:
        response.json.side_effect = ValueError("Expecting value: line 1 column 1 (char 0)")
        response.text = text or ""
    else:
        response.json.return_value = json_data
        response.text = text if text is not None else json.dumps(json_data)
    return response
