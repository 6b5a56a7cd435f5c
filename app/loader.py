"""
portfolio.json ➜ Portfolio
– validates the document once, at load time
– reports duplicate entry keys (data-quality warning, never fatal)
"""
from __future__ import annotations
import json, logging
from pathlib import Path
from typing import Dict, List

from pydantic import ValidationError

from config import PORTFOLIO_CONTENT_PATH
from schema_portfolio import Portfolio

logger = logging.getLogger(__name__)


class ContentError(ValueError):
    """The content file is missing, unreadable, or does not fit the schema."""


def load_portfolio(path: str | Path | None = None) -> Portfolio:
    path = Path(path or PORTFOLIO_CONTENT_PATH)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as e:
        raise ContentError(f"Content file not found: {path}") from e
    except json.JSONDecodeError as e:
        raise ContentError(f"{path} is not valid JSON: {e}") from e

    try:
        portfolio = Portfolio.model_validate(raw)
    except ValidationError as e:
        raise ContentError(f"{path} does not match the portfolio schema:\n{e}") from e

    for section, keys in find_duplicate_keys(portfolio).items():
        for key in keys:
            logger.warning("Duplicate %s entry key %r in %s", section, key, path)

    logger.info(
        "Loaded portfolio for %s (%d experience entries, %d projects)",
        portfolio.profile.name,
        len(portfolio.experience),
        len(portfolio.projects),
    )
    return portfolio


def find_duplicate_keys(portfolio: Portfolio) -> Dict[str, List[str]]:
    """Keys that occur more than once per list, in first-seen order."""
    found = {}
    for section, entries in (
        ("experience", portfolio.experience),
        ("projects", portfolio.projects),
    ):
        seen, dupes = set(), []
        for entry in entries:
            if entry.key in seen and entry.key not in dupes:
                dupes.append(entry.key)
            seen.add(entry.key)
        if dupes:
            found[section] = dupes
    return found
