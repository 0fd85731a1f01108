"""
Crawl controller.

Downloads a page (or reads a local dump), scans it for hostnames and IPs,
classifies what it found and recursively scrapes the scripts worth following.
"""

import logging
import sys
from pathlib import Path
from typing import Optional, TextIO, Union
from urllib.parse import urlparse

from .classifier import classify
from .errors import EmptyTargetError, FetchError, ScraperError
from .extractor import Extractor
from .fetcher import Fetcher, download_path, read_chunks, with_scheme
from .tlds import TLDRegistry
from .types import ScrapeResult
from . import config

logger = logging.getLogger(__name__)


def root_hostname(target: str) -> str:
    """Hostname of a target given with or without a scheme."""
    return urlparse(with_scheme(target)).hostname or target


class ScrapeController:
    def __init__(
        self,
        registry: TLDRegistry,
        fetcher: Optional[Fetcher] = None,
        max_level: int = config.MAX_LEVEL,
        chunk_size: int = config.CHUNK_SIZE,
        download_dir: Union[str, Path, None] = None,
        output: Optional[TextIO] = None,
    ) -> None:
        """Initialize the controller. It keeps no per-crawl state between calls."""
        self.extractor = Extractor(registry)
        self.fetcher = fetcher or Fetcher()
        self.max_level = max_level
        self.chunk_size = chunk_size
        self.download_dir = download_dir or config.DOWNLOAD_DIR
        self.output = output

    def scrape_site(self, target: str, depth: int = 0) -> ScrapeResult:
        """Download ``target`` and scrape the saved copy.

        Raises:
            FetchError: the download failed. Nothing is scanned.
        """
        file_name = download_path(target, self.download_dir)
        logger.info(f"Downloading {target} to {file_name}")
        try:
            self.fetcher.download(target, file_name)
        except FetchError as e:
            logger.critical(f"Download did not work for {target}: {e}")
            raise

        result = self.scrape_local_file(root_hostname(target), str(file_name), depth=depth)
        result["target"] = target
        return result

    def scrape_site_list(self, target_site_list_filename: str) -> None:
        """Batch mode is not implemented; accepts the file name and does nothing."""
        logger.debug(f"Site list scraping is not implemented, ignoring {target_site_list_filename}")
        return None

    def scrape_local_file(self, hostname: str, local_filename: str, depth: int = 0) -> ScrapeResult:
        """Scan a page dump on disk and follow what it points at.

        ``hostname`` is the site the page belongs to; scripts served from it
        are followed like CDN scripts.

        Raises:
            EmptyTargetError: ``local_filename`` is empty.
            FetchError: the file could not be opened.
            ReadError: the file could not be read to the end.
        """
        if not local_filename:
            raise EmptyTargetError("local_filename cannot be empty")

        logger.info(f"Scraping local file {local_filename} for {hostname} at depth {depth}")
        try:
            session = self.extractor.scan(read_chunks(local_filename, self.chunk_size), hostname)
        except ScraperError as e:
            logger.critical(f"Could not read {local_filename}: {e}")
            raise
        classify(session)

        result: ScrapeResult = {
            "target": local_filename,
            "root_hostname": hostname,
            "depth": depth,
            "discovered_ips": session.discovered_ips,
            "discovered_urls": session.discovered_urls,
            "cloud_hostnames": [],
            "children": [],
            "failed": [],
        }

        # Each followed url uses up one level of this page's remaining depth
        level = depth
        for url in session.discovered_urls:
            if url.follow:
                logger.debug(f"Checking: {url.hostname} with: {url.url}")
                if level < self.max_level:
                    self._scrape_child(url.url, level + 1, result)
                    level += 1
                else:
                    logger.debug(f"Max level {self.max_level} reached, not following {url.url}")
            if url.cloud_hosted:
                logger.info(f"AWS: {url.hostname}")
                result["cloud_hostnames"].append(url.hostname)
                self._emit(url.hostname)

        return result

    def _scrape_child(self, target: str, depth: int, result: ScrapeResult) -> None:
        try:
            result["children"].append(self.scrape_site(target, depth=depth))
        except ScraperError as e:
            logger.error(f"Abandoning {target} at depth {depth}: {e}")
            result["failed"].append(target)

    def _emit(self, hostname: str) -> None:
        out = self.output or sys.stdout
        print(hostname, file=out)
