"""
Static build: portfolio.json ➜ <out>/index.html (+ style.css).

    folio2site-build --content content/portfolio.json --out site/
    folio2site-build --serve        # build, then preview until Ctrl-C
"""

from __future__ import annotations
import argparse
import logging
import shutil
import sys
import time
from pathlib import Path
from typing import Optional

from config import LOG_LEVEL, PORTFOLIO_CONTENT_PATH, SITE_OUTPUT_DIR, content_label
from generator_rule import CSS_PATH, DEFAULT_CONTENT_LABEL, current_year, portfolio_to_html
from html_check import validate_html
from loader import ContentError, load_portfolio
from schema_portfolio import Portfolio
from temp_server import cleanup_temp_server, serve_html_temporarily

logger = logging.getLogger(__name__)


def build_site(portfolio: Portfolio, out_dir: str | Path | None = None,
               year: Optional[int] = None, inline: bool = False,
               title: Optional[str] = None,
               content_path: str = DEFAULT_CONTENT_LABEL) -> Path:
    out = Path(out_dir or SITE_OUTPUT_DIR)
    out.mkdir(parents=True, exist_ok=True)

    # read the clock once per build
    year = current_year() if year is None else year
    html = portfolio_to_html(portfolio, year=year, inline=inline, title=title,
                             content_path=content_path)
    for problem in validate_html(html):
        logger.warning(problem)

    index = out / "index.html"
    index.write_text(html, encoding="utf-8")
    if not inline:
        shutil.copyfile(CSS_PATH, out / "style.css")
    logger.info("Wrote %s", index)
    return index


def _parse_args(argv):
    parser = argparse.ArgumentParser(description="Render a portfolio site from its JSON content file.")
    parser.add_argument("--content", type=Path, default=PORTFOLIO_CONTENT_PATH,
                        help="portfolio JSON file (default: %(default)s)")
    parser.add_argument("--out", type=Path, default=SITE_OUTPUT_DIR,
                        help="output directory (default: %(default)s)")
    parser.add_argument("--title", help="page title prefix, e.g. the owner's name")
    parser.add_argument("--inline", action="store_true",
                        help="embed the stylesheet in index.html")
    parser.add_argument("--serve", action="store_true",
                        help="serve the result on a temporary local port")
    return parser.parse_args(argv)


def main(argv=None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(level=LOG_LEVEL, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        portfolio = load_portfolio(args.content)
    except ContentError as e:
        logger.error("%s", e)
        return 1

    # one clock reading and one content label for the build and its preview
    year = current_year()
    label = content_label(args.content)
    index = build_site(portfolio, args.out, year=year, inline=args.inline,
                       title=args.title, content_path=label)
    if not args.serve:
        return 0

    # the preview serves a single file, so the stylesheet goes inline
    if args.inline:
        html = index.read_text(encoding="utf-8")
    else:
        html = portfolio_to_html(portfolio, year=year, inline=True, title=args.title,
                                 content_path=label)
    print(serve_html_temporarily(html))
    try:
        while True:
            time.sleep(1)
    except KeyboardInterrupt:
        pass
    finally:
        cleanup_temp_server()
    return 0


if __name__ == "__main__":
    sys.exit(main())
