"""
Pytest configuration for the tsorganizer test suite.

This conftest.py provides:
- Machine-mode logging (suppresses console output)
- Common fixtures for temp directories and sample sources
"""

import os
import shutil
import tempfile
from pathlib import Path

import pytest

from tsorganizer.cli.config import CLIConfig
from tsorganizer.config import Configuration, SectionDefinition, default_configuration
from tsorganizer.logging_config import setup_logging

TEST_FILES_DIR = Path(__file__).parent / "test_files"


# ============================================================================
# GLOBAL CONFIGURATION
# ============================================================================

def pytest_configure(config):
    """Configure pytest for quiet operation."""
    os.environ.setdefault("TSORGANIZER_MACHINE_MODE", "1")


# ============================================================================
# LOGGING FIXTURES
# ============================================================================

@pytest.fixture(autouse=True)
def setup_test_logging():
    """
    Machine mode by default - suppress console logs for clean test output.
    """
    setup_logging(level="DEBUG", suppress_console=True, force=True)
    yield
    CLIConfig.reset()


# ============================================================================
# TEMPORARY DIRECTORY FIXTURES
# ============================================================================

@pytest.fixture
def temp_dir():
    """Create a temporary directory that's cleaned up after the test."""
    tmp = Path(tempfile.mkdtemp(prefix="tsorganizer_test_"))
    yield tmp
    shutil.rmtree(tmp, ignore_errors=True)


# ============================================================================
# CONFIGURATION FIXTURES
# ============================================================================

@pytest.fixture
def default_config():
    return default_configuration()


@pytest.fixture
def simple_config():
    """
    Classes first, then functions; members split into Properties and Methods.
    """
    return Configuration(
        sections=(
            SectionDefinition(label="Classes", kinds=("class",)),
            SectionDefinition(label="Functions", kinds=("function",), sort_alphabetically=True),
        ),
        member_sections=(
            SectionDefinition(label="Properties", kinds=("property",)),
            SectionDefinition(label="Methods", kinds=("method",)),
        ),
    )


@pytest.fixture
def sample_source():
    return (TEST_FILES_DIR / "sample.ts").read_text(encoding="utf-8")
