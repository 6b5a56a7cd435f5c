"""
Utility functions for the folio2site app.
"""

MAILTO_PREFIX = "mailto:"


def display_key(*parts: str) -> str:
    """Joins entry fields into the key used to tell list entries apart."""
    return "-".join(parts)


def is_mailto(href: str) -> bool:
    """True for mail-scheme links, which open in the same browsing context."""
    return href.startswith(MAILTO_PREFIX)
