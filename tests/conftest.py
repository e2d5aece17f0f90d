"""
Pytest configuration and shared fixtures.

Fixtures defined here are available to all test files automatically.
"""

import sys
from pathlib import Path

import pytest

# Flat layout: modules live at the project root
root_path = Path(__file__).parent.parent
if str(root_path) not in sys.path:
    sys.path.insert(0, str(root_path))


@pytest.fixture
def default_domain():
    from graphing import PlotDomain
    return PlotDomain.default()


@pytest.fixture
def client():
    """Flask test client for the web app."""
    from app import app
    app.config.update(TESTING=True)
    with app.test_client() as c:
        yield c
