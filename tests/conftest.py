"""
Pytest configuration and fixtures
"""
import json
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from generator_rule import portfolio_to_html
from schema_portfolio import Portfolio

PROJECT_ROOT = Path(__file__).resolve().parent.parent
SAMPLE_CONTENT = PROJECT_ROOT / "content" / "portfolio.json"

YEAR = 2024


def make_portfolio_data(**overrides):
    """Smallest valid document; top-level keys can be replaced per test."""
    data = {
        "profile": {
            "name": "Ada",
            "role": "Engineer",
            "headline": "Analytical engines, mostly",
            "summary": "Writes programs for machines that do not exist yet.",
            "about": "Mathematician and writer.",
            "location": "London",
            "email": "ada@example.com",
            "contactBlurb": "Letters welcome.",
            "highlights": ["First published algorithm"],
            "links": [
                {"label": "Email", "href": "mailto:ada@example.com"},
                {"label": "Notes", "href": "https://example.com/notes"},
            ],
        },
        "skills": ["Go"],
        "experience": [],
        "projects": [{"name": "X", "description": "d"}],
    }
    data.update(overrides)
    return data


@pytest.fixture
def portfolio_data():
    return make_portfolio_data()


@pytest.fixture
def portfolio(portfolio_data):
    return Portfolio.model_validate(portfolio_data)


@pytest.fixture
def sample_portfolio():
    return Portfolio.model_validate(json.loads(SAMPLE_CONTENT.read_text(encoding="utf-8")))


@pytest.fixture
def content_file(tmp_path, portfolio_data):
    path = tmp_path / "portfolio.json"
    path.write_text(json.dumps(portfolio_data), encoding="utf-8")
    return path


def render_soup(portfolio, year=YEAR, **kwargs):
    return BeautifulSoup(portfolio_to_html(portfolio, year=year, **kwargs), "html.parser")
