"""
Errors raised while fetching and scanning pages.
"""


class ScraperError(Exception):
    """Base class for every error raised by host_scraper."""


class FetchError(ScraperError):
    """Page content could not be retrieved (network or filesystem)."""


class ReadError(ScraperError):
    """Reading an already opened page failed part way through."""


class EmptyTargetError(ScraperError, ValueError):
    """A local scrape was requested without a filename."""
