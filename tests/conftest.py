import pytest
from bs4 import BeautifulSoup

from docrender import render_markdown


@pytest.fixture
def render():
    """Render markdown and return (document, soup)."""

    def _render(text, **kwargs):
        document = render_markdown(text, **kwargs)
        return document, BeautifulSoup(document.html, "html.parser")

    return _render
