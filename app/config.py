"""
Configuration settings for the folio2site application.

The content file is the only thing that decides what the page shows; the
settings here only say where that file lives and where the build goes.
Values can be overridden through the environment or a local .env file.
"""

from __future__ import annotations

from dotenv import load_dotenv
load_dotenv()          # ← must be before os.getenv(...)
import os
from pathlib import Path

# app/config.py -> app/ -> project root
PROJECT_ROOT = Path(__file__).resolve().parent.parent

# Well-known location of the portfolio content document
PORTFOLIO_CONTENT_PATH = Path(
    os.getenv("PORTFOLIO_CONTENT_PATH", PROJECT_ROOT / "content" / "portfolio.json")
)

# Where `folio2site-build` writes index.html and style.css
SITE_OUTPUT_DIR = Path(os.getenv("SITE_OUTPUT_DIR", PROJECT_ROOT / "site"))

# The resume link is emitted unconditionally; the asset itself is optional
RESUME_HREF = os.getenv("RESUME_HREF", "/resume.pdf")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


def content_label(path: Path | None = None) -> str:
    """Path of the content file as shown on the page (relative when possible)."""
    path = Path(path or PORTFOLIO_CONTENT_PATH).resolve()
    try:
        return path.relative_to(PROJECT_ROOT).as_posix()
    except ValueError:
        return path.as_posix()
