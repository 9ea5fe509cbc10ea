"""
Date normalization for RSS ``pubDate`` values.

Dates on the scraped page are written in the site's own calendar
conventions (e.g. ``12 januari 2024``). They are parsed with
``dateutil`` using a locale-specific ``parserinfo`` and rendered in the
RFC 822 format RSS readers expect.
"""

import logging
from datetime import datetime

import pytz
from dateutil import parser as date_parser

logger = logging.getLogger(__name__)

RFC822_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
RFC822_MONTHS = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class DateParseError(ValueError):
    """Raised when a date string cannot be understood."""


class DutchParserInfo(date_parser.parserinfo):
    """Month and weekday names as written on Dutch websites."""

    JUMP = date_parser.parserinfo.JUMP + ["om", "uur", "de", "van"]
    WEEKDAYS = [
        ("ma", "maandag"),
        ("di", "dinsdag"),
        ("wo", "woensdag"),
        ("do", "donderdag"),
        ("vr", "vrijdag"),
        ("za", "zaterdag"),
        ("zo", "zondag"),
    ]
    MONTHS = [
        ("jan", "januari"),
        ("feb", "februari"),
        ("mrt", "maart"),
        ("apr", "april"),
        ("mei",),
        ("jun", "juni"),
        ("jul", "juli"),
        ("aug", "augustus"),
        ("sep", "sept", "september"),
        ("okt", "oktober"),
        ("nov", "november"),
        ("dec", "december"),
    ]

    def __init__(self) -> None:
        super().__init__(dayfirst=True)


# calendar name -> (parserinfo factory, timezone of naive dates)
CALENDARS = {
    "nl-NL": (DutchParserInfo, "Europe/Amsterdam"),
}


def format_rfc822(value: datetime) -> str:
    """Render an aware datetime as an RFC 822 date, independent of locale."""
    offset = value.utcoffset()
    if offset is not None and not offset:
        zone = "GMT"
    else:
        zone = value.strftime("%z")
    return "%s, %02d %s %04d %02d:%02d:%02d %s" % (
        RFC822_WEEKDAYS[value.weekday()],
        value.day,
        RFC822_MONTHS[value.month - 1],
        value.year,
        value.hour,
        value.minute,
        value.second,
        zone,
    )


def normalize_date(text: str, calendar: str = "nl-NL") -> str:
    """Convert a date written in ``calendar`` conventions to RSS format.

    Args:
        text: Date as it appears on the page. Empty text yields an empty string.
        calendar: Name of the source calendar, e.g. ``nl-NL``.

    Returns:
        The date formatted as ``Fri, 12 Jan 2024 00:00:00 +0100``.

    Raises:
        DateParseError: If the calendar is unknown or the text is not a date.
    """
    if not text.strip():
        return ""

    try:
        info_factory, zone_name = CALENDARS[calendar]
    except KeyError as e:
        raise DateParseError(f"Unsupported calendar: {calendar}") from e

    default = datetime.now().replace(hour=0, minute=0, second=0, microsecond=0)
    try:
        parsed = date_parser.parse(text, parserinfo=info_factory(), default=default)
    except (ValueError, OverflowError) as e:
        raise DateParseError(f"Could not parse date '{text}': {e}") from e

    if parsed.tzinfo is None:
        parsed = pytz.timezone(zone_name).localize(parsed)

    logger.debug("Normalized date '%s' to %s", text, parsed.isoformat())
    return format_rfc822(parsed)
