"""Shared fixtures for the commentmark test suite."""

import pytest
from bs4 import BeautifulSoup

from commentmark.context import RenderContext


@pytest.fixture
def context():
    """A fresh render context with the default configuration."""
    return RenderContext()


@pytest.fixture
def soup():
    """Parse rendered HTML for structural assertions."""

    def parse(html):
        return BeautifulSoup(html, "html.parser")

    return parse
