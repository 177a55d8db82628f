import pytest

from string_calculator import DelimitedNumbersCalculator


# Common test fixtures
@pytest.fixture
def calculator():
    """Return a calculator with the default settings."""
    return DelimitedNumbersCalculator()
