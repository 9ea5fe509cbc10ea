"""
RSS 2.0 rendering.

Plain string templates: field values are inserted as-is, so text containing
``<`` or ``&`` ends up unescaped in the document.
"""

from .types import Article

DEFAULT_CHANNEL_TITLE = "Limes Volleybal RSS Feed"

ITEM_TEMPLATE = """
            <item>
                <title>{title}</title>
                <link>{link}</link>
                <description>{description}</description>
                <pubDate>{pub_date}</pubDate>
            </item>
"""

FEED_TEMPLATE = """<?xml version="1.0" encoding="UTF-8" ?>
    <rss version="2.0">
        <channel>
            <title>{title}</title>
            <link>{link}</link>
            <description></description>
            {items}
        </channel>
    </rss>"""


def render_item(article: Article) -> str:
    """Render one article as an ``<item>`` fragment."""
    return ITEM_TEMPLATE.format(
        title=article.title,
        link=article.link,
        description=article.description,
        pub_date=article.pub_date,
    )


def render_feed(
    items: str, site_url: str, title: str = DEFAULT_CHANNEL_TITLE
) -> str:
    """Wrap concatenated item fragments in the channel envelope.

    Args:
        items: Concatenated ``<item>`` fragments.
        site_url: Used as the channel link.
        title: Channel title.

    Returns:
        The complete feed document.
    """
    return FEED_TEMPLATE.format(title=title, link=site_url, items=items)
