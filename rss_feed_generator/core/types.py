"""
Type definitions and Pydantic models for the RSS Feed Generator.
"""

from pydantic import BaseModel, ConfigDict, Field


class MarkerPair(BaseModel):
    """Start and end delimiters surrounding a region of interest."""
    start: str = Field(..., min_length=1, description="Marker preceding the region")
    end: str = Field(..., min_length=1, description="Marker following the region")


class Markers(BaseModel):
    """Marker pairs used to locate article fields in the page source."""
    article: MarkerPair = MarkerPair(start="<article class=", end="</article>")
    header: MarkerPair = MarkerPair(start="-heading", end="</h2>")
    link: MarkerPair = MarkerPair(start='href="', end='"')
    title: MarkerPair = MarkerPair(start=">", end="</a>")
    description: MarkerPair = MarkerPair(start="<p>", end="</p>")
    date: MarkerPair = MarkerPair(start='jw-news-date">', end="<")


class FeedConfig(BaseModel):
    """Settings for a single feed generation run."""
    url: str = Field("https://www.limesvolleybal.nl/", description="Site to scrape")
    output_path: str = Field("rss.xml", description="Where the feed is written")
    channel_title: str = "Limes Volleybal RSS Feed"
    calendar: str = Field("nl-NL", description="Calendar of the dates on the page")
    timeout: float = Field(30, gt=0, description="HTTP timeout in seconds")
    markers: Markers = Field(default_factory=Markers)

    model_config = ConfigDict(extra="ignore")


class Article(BaseModel):
    """Represents a news article scraped from the page."""
    title: str
    link: str
    description: str = ""
    pub_date: str = ""
