"""
Structural checks for rendered pages.

html5lib in strict mode stops at the first HTML parse error; CSS found in
<style> tags goes through cssutils with its log captured into the result.
"""

from __future__ import annotations
import logging

import cssutils
import html5lib
from bs4 import BeautifulSoup

# Configure cssutils logging to be less verbose for common errors
cssutils.log.setLevel(logging.CRITICAL)


class _CaptureCSSLogHandler(logging.Handler):
    def __init__(self, error_list):
        super().__init__()
        self.error_list = error_list

    def emit(self, record):
        self.error_list.append(f"CSS Error in <style> tag: {record.getMessage()}")


def validate_html(html_content: str) -> list[str]:
    """Validates HTML structure and inline CSS. Returns a list of error messages."""
    errors = []
    try:
        html5lib.HTMLParser(strict=True).parse(html_content)
    except html5lib.html5parser.ParseError as e:
        errors.append(f"HTML ParseError: {e}")

    soup = BeautifulSoup(html_content, "html.parser")
    css_logger = logging.getLogger("cssutils")

    for style_tag in soup.find_all("style"):
        if not style_tag.string:
            continue
        handler = _CaptureCSSLogHandler(errors)
        original_level = css_logger.level
        css_logger.addHandler(handler)
        css_logger.setLevel(logging.ERROR)
        try:
            cssutils.CSSParser(validate=False, raiseExceptions=False).parseString(
                style_tag.string
            )
        finally:
            css_logger.removeHandler(handler)
            css_logger.setLevel(original_level)

    return errors
