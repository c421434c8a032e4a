"""Seed list of pages ingested by default."""

from __future__ import annotations

from docsearch.models import PageSource

DEFAULT_PAGES: tuple[PageSource, ...] = (
    PageSource(url="https://www.loveandlemons.com/homemade-pizza/"),
    PageSource(url="https://www.interaction-design.org/literature/topics/color-theory"),
    PageSource(url="https://api-docs.deepseek.com/"),
    PageSource(url="https://www.dndbeyond.com/sources/dnd/free-rules/creating-a-character"),
    PageSource(url="https://stardewvalleywiki.com/Crops"),
)


def pages_from_urls(urls: list[str]) -> list[PageSource]:
    return [PageSource(url=u) for u in urls]
