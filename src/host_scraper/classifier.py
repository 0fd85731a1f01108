"""
Marks discovered URLs as worth following and/or hosted on cloud infrastructure.
"""

import logging
from typing import Iterable

from .patterns import SCRIPT_SUFFIX_RE
from .types import CrawlSession, DiscoveredUrl
from . import config

logger = logging.getLogger(__name__)


def is_script(url: DiscoveredUrl) -> bool:
    return SCRIPT_SUFFIX_RE.search(url.url) is not None


def mark_urls_to_follow(session: CrawlSession, cdn_markers: Iterable[str] = config.CDN_MARKERS) -> None:
    """Follow scripts served from a known CDN or from the page's own site."""
    cdn_markers = tuple(cdn_markers)
    root = session.root_hostname
    for url in session.discovered_urls:
        from_cdn = any(marker in url.hostname for marker in cdn_markers)
        from_root = bool(root) and root in url.hostname
        url.follow = (from_cdn or from_root) and is_script(url)
        if url.follow:
            logger.debug(f"Follow: {url.url}")


def mark_cloud_hosted(session: CrawlSession, cloud_markers: Iterable[str] = config.CLOUD_MARKERS) -> None:
    cloud_markers = tuple(cloud_markers)
    for url in session.discovered_urls:
        if any(marker in url.url for marker in cloud_markers):
            logger.debug(f"AWS: {url.url}")
            url.cloud_hosted = True


def classify(session: CrawlSession) -> CrawlSession:
    mark_urls_to_follow(session)
    mark_cloud_hosted(session)
    return session
