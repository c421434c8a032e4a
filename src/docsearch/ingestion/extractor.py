"""HTML → normalized plain text."""

from __future__ import annotations

import logging
import re

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from docsearch.models import ExtractedContent

logger = logging.getLogger(__name__)

_WHITESPACE_RE = re.compile(r"\s+")


def normalize_whitespace(text: str) -> str:
    """Collapse every whitespace run to one space and trim both ends."""
    return _WHITESPACE_RE.sub(" ", text).strip()


def extract_text(html: str | None) -> str:
    """Return the body text of *html* with whitespace normalized.

    Never raises: markup the parser rejects, or a document without a
    ``<body>``, yields ``""``.
    """
    if not html:
        return ""
    try:
        soup = BeautifulSoup(html, "html.parser")
    except ParserRejectedMarkup as exc:
        logger.warning("Could not parse HTML: %s", exc)
        return ""
    if soup.body is None:
        return ""
    return normalize_whitespace(soup.body.get_text())


def extract(url: str, html: str | None) -> ExtractedContent:
    """Like :func:`extract_text`, tagged with the page URL."""
    return ExtractedContent(url=url, text=extract_text(html))
