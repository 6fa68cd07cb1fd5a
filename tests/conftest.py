import pytest

from rainbowvis import Rainbow


@pytest.fixture
def rainbow():
    """Rainbow with the default spectrum and range."""
    return Rainbow()


@pytest.fixture
def red_blue():
    """Two-color Rainbow from red to blue over [0, 100]."""
    return Rainbow(spectrum=["red", "blue"])
