"""
Article parsing module.

Walks the page source block by block and pulls the feed fields out of
every article using the configured markers.

Components:
- parse_articles: Build Article records in page order
- extract_articles: Render those records as feed item fragments

Scanning stops at the first article missing a required field (block,
header, link or title); the articles seen before it are kept and the rest
of the page is ignored.
"""

import logging

from .dates import normalize_date
from .extract import extract
from .render import render_item
from .types import Article, Markers

logger = logging.getLogger(__name__)


def parse_articles(
    content: str,
    base_url: str,
    markers: Markers | None = None,
    calendar: str = "nl-NL",
) -> list[Article]:
    """Parse all article blocks from the page source.

    Args:
        content: Raw page HTML.
        base_url: Prefix for the relative links found in the articles.
        markers: Marker pairs locating each field.
        calendar: Calendar of the dates written on the page.

    Returns:
        Articles in the order they appear on the page.

    Raises:
        DateParseError: If an article carries a date that cannot be parsed.
    """
    markers = markers or Markers()
    articles: list[Article] = []
    article_index = 0

    while (article_index := content.find(markers.article.start, article_index)) != -1:
        article = extract(content, markers.article.start, markers.article.end, article_index)
        if not article.found:
            logger.warning("Unterminated article block at offset %d, stopping", article_index)
            break

        # required
        header = extract(article.text, markers.header.start, markers.header.end)
        if not header.found:
            logger.warning("Article at offset %d has no header, stopping", article_index)
            break
        link = extract(header.text, markers.link.start, markers.link.end)
        if not link.found:
            logger.warning("Article at offset %d has no link, stopping", article_index)
            break
        title = extract(header.text, markers.title.start, markers.title.end, link.end)
        if not title.found:
            logger.warning("Article at offset %d has no title, stopping", article_index)
            break

        # optional
        description = extract(
            article.text, markers.description.start, markers.description.end, header.start
        )
        date = extract(article.text, markers.date.start, markers.date.end)

        articles.append(
            Article(
                title=title.text,
                link=base_url + link.text,
                description=description.text,
                pub_date=normalize_date(date.text, calendar),
            )
        )
        logger.debug("Parsed article '%s'", title.text)

        article_index = article.end

    logger.info("Extracted %d articles", len(articles))
    return articles


def extract_articles(
    content: str,
    base_url: str,
    markers: Markers | None = None,
    calendar: str = "nl-NL",
) -> list[str]:
    """Parse the page and render every article as an ``<item>`` fragment."""
    return [
        render_item(article)
        for article in parse_articles(content, base_url, markers, calendar)
    ]
