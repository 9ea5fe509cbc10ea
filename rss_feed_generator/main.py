"""
RSS Feed Generator.

Builds an RSS 2.0 feed from a website that does not publish one:
1. Fetches the site's HTML
2. Extracts the news articles from it
3. Renders the articles as an RSS document
4. Writes the document to the configured output file

Failures are reported on the console; the process always exits normally.
"""

import argparse
import logging
from pathlib import Path

from rss_feed_generator.core.articles import extract_articles
from rss_feed_generator.core.config import load_config
from rss_feed_generator.core.fetch import fetch_page
from rss_feed_generator.core.log_handler import configure_logging
from rss_feed_generator.core.render import render_feed
from rss_feed_generator.core.types import FeedConfig

logger = logging.getLogger(__name__)


def generate_feed(config: FeedConfig) -> Path:
    """Fetch the site, build the feed and write it to disk.

    The document is rendered completely before the output file is opened,
    so a failed run leaves an existing feed untouched.

    Args:
        config: Settings for this run.

    Returns:
        Path of the written feed.

    Raises:
        requests.exceptions.RequestException: If the page cannot be fetched.
        DateParseError: If an article date cannot be parsed.
        OSError: If the feed cannot be written.
    """
    content = fetch_page(config.url, timeout=config.timeout)

    items = extract_articles(content, config.url, config.markers, config.calendar)
    rss_content = render_feed("".join(items), config.url, config.channel_title)

    path = Path(config.output_path)
    path.write_text(rss_content, encoding="utf-8")
    logger.info("Wrote %d items to %s", len(items), path)
    return path


def run(config: FeedConfig) -> bool:
    """Generate the feed and report the outcome on the console.

    Returns:
        True if the feed was written.
    """
    try:
        path = generate_feed(config)
    except Exception as e:
        logger.error("Feed generation failed: %s", e, exc_info=True)
        print(f"Could not generate RSS feed: {e}")
        return False

    print(f"RSS feed has been generated successfully: {path}")
    return True


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Generate an RSS feed from a website's news articles"
    )
    parser.add_argument("--config", help="Path to a JSON config file")
    parser.add_argument("--url", help="Override the site URL")
    parser.add_argument("--output", help="Override the output file path")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument("--log-file", help="Also write logs to this file")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Console entry point. Always returns 0."""
    args = parse_args(argv)

    try:
        configure_logging(args.log_level, args.log_file)
        config = load_config(args.config)
    except Exception as e:
        logger.error("Invalid settings: %s", e, exc_info=True)
        print(f"Could not generate RSS feed: {e}")
        return 0

    overrides = {}
    if args.url:
        overrides["url"] = args.url
    if args.output:
        overrides["output_path"] = args.output
    if overrides:
        config = config.model_copy(update=overrides)

    run(config)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
