"""
Page Fetcher Module.

This module downloads the HTML of the site the feed is generated from.
"""

import logging

import requests

logger = logging.getLogger(__name__)

REQUEST_TIMEOUT_SECONDS = 30
USER_AGENT = "rss-feed-generator/1.0 (+https://www.limesvolleybal.nl/)"


def fetch_page(
    url: str,
    timeout: float = REQUEST_TIMEOUT_SECONDS,
) -> str:
    """Fetch a web page and return its body as text.

    Args:
        url: The page to download.
        timeout: Seconds to wait for the server before giving up.

    Returns:
        The decoded response body.

    Raises:
        requests.exceptions.RequestException: On transport errors or any
            non-2xx response. Nothing is retried.
    """
    logger.info("Fetching page from URL: %s", url)
    try:
        response = requests.get(url, timeout=timeout, headers={"User-Agent": USER_AGENT})
        response.raise_for_status()
    except requests.exceptions.RequestException as e:
        logger.error("Failed to fetch %s: %s", url, e)
        raise

    # requests falls back to ISO-8859-1 for text/* without a charset
    if "charset" not in response.headers.get("Content-Type", "").lower():
        response.encoding = "utf-8"

    logger.info("Fetched %d characters from %s", len(response.text), url)
    return response.text
