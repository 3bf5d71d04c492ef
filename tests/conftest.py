# tests/conftest.py
# This file is part of Tabula - A Boolean Truth Table Evaluator
#
# Test configuration and shared fixtures for pytest

"""Test configuration and shared fixtures for the truth table tests.

The configuration handles:
- Python path setup for module imports
- Logger creation before any test captures output
- Common expression fixtures
"""

import sys
import pytest
from pathlib import Path

# Ensure project modules can be imported
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))


@pytest.fixture(scope="session", autouse=True)
def setup_test_environment():
    """Verify module availability and create the global logger.

    Yields:
        None: Control to test execution

    Raises:
        pytest.skip: If required modules cannot be imported
    """
    try:
        import parser
        import evaluation
        import utils
    except ImportError as e:
        pytest.skip(f"Cannot import required modules: {e}")

    utils.get_logger()

    yield


@pytest.fixture
def basic_expression():
    """Provide the two-variable conjunction used in the usage examples.

    Returns:
        str: Simple expression
    """
    return "a & b"


@pytest.fixture
def multi_expression():
    """Provide an input with two `=`-separated sub-expressions.

    Returns:
        str: Expression sharing variables across sub-expressions
    """
    return "a&b=a|b|c"
