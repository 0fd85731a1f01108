"""
Scrapes pages for embedded hostnames, URLs and IPv4 addresses.
"""

from . import classifier
from . import config
from . import extractor
from . import scraper

__all__ = ["classifier", "config", "extractor", "scraper"]
