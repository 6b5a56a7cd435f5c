from __future__ import annotations
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Optional, Tuple

from jinja2 import Environment, FileSystemLoader

from config import RESUME_HREF
from schema_portfolio import Portfolio
from utils import is_mailto

CSS_PATH = Path(__file__).parent / "static" / "style.css"
env = Environment(loader=FileSystemLoader(Path(__file__).parent / "templates"),
                  autoescape=True)
env.tests["mailto"] = is_mailto

# anchor ids are linked to literally from the nav; never rename them
SECTION_IDS = ("top", "about", "experience", "projects", "contact")

# shown on the contact card when the caller does not name the loaded file
DEFAULT_CONTENT_LABEL = "content/portfolio.json"


@dataclass(frozen=True)
class Section:
    id: str
    title: str
    description: str = ""


def build_sections(portfolio: Portfolio) -> Tuple[Section, ...]:
    """Page sections in display order, each addressable by its anchor id."""
    profile = portfolio.profile
    headings = {
        "top": ("Highlights", ""),
        "about": ("About", profile.about),
        "experience": ("Experience", "Recent roles and impact."),
        "projects": ("Projects",
                     "Selected work — shipped products, prototypes, and experiments."),
        "contact": ("Contact", profile.contact_blurb),
    }
    return tuple(Section(section_id, *headings[section_id]) for section_id in SECTION_IDS)


def current_year(now: Optional[datetime] = None) -> int:
    return (now or datetime.now()).year


def portfolio_to_html(portfolio: Portfolio, year: int, inline: bool = False,
                      title: Optional[str] = None,
                      content_path: str = DEFAULT_CONTENT_LABEL) -> str:
    """Render portfolio → HTML.  If inline=True, embed CSS in a <style> tag.

    ``content_path`` is the label of the file the portfolio was loaded from,
    as shown in the contact card's edit note.
    """
    css_inline = CSS_PATH.read_text(encoding="utf-8") if inline else ""
    return env.get_template("base.html").render(
        p=portfolio,
        sections=build_sections(portfolio),
        year=year,
        title=f"{title} · Portfolio" if title else "Portfolio",
        resume_href=RESUME_HREF,
        content_path=content_path,
        inline_css=css_inline,
    )
