"""
Extraction engine: scans raw page text for IPv4 addresses and TLD-validated URLs.
"""

import logging
from typing import Iterable, List, Optional, Union

from .patterns import HOSTNAME_RE, IPV4_RE, TLD_SUFFIX_RE, URL_RE, is_marker
from .tlds import TLDRegistry
from .types import CrawlSession, DiscoveredUrl

logger = logging.getLogger(__name__)


class Extractor:
    def __init__(self, registry: TLDRegistry) -> None:
        self.registry = registry

    def extract_ips(self, chunk: str) -> List[str]:
        """Return every dotted-quad match in the chunk, verbatim and in order."""
        ips = [match.group(0) for match in IPV4_RE.finditer(chunk)]
        for ip in ips:
            logger.debug(f"--> ip: {ip}")
        return ips

    def extract_urls(self, chunk: str) -> List[DiscoveredUrl]:
        """Return the URL candidates in the chunk whose TLD is registered.

        The leading quote or slash that introduced a candidate is stripped from
        both the URL and its hostname.
        """
        urls = []
        for match in URL_RE.finditer(chunk):
            raw_url = match.group(0)
            raw_hostname = HOSTNAME_RE.match(raw_url).group(0)

            tld = self._tld_of(raw_hostname)
            if tld is None or not self.registry.is_valid_tld(tld):
                logger.debug(f"Discarding {raw_url!r}: unknown TLD {tld!r}")
                continue

            if is_marker(raw_url[0]):
                url, hostname = raw_url[1:], raw_hostname[1:]
            else:
                url, hostname = raw_url, raw_hostname

            logger.info(f"---> url: {url}")
            logger.info(f"---> hostname: {hostname}")
            urls.append(DiscoveredUrl(url=url, hostname=hostname))
        return urls

    def _tld_of(self, hostname: str) -> Optional[str]:
        match = TLD_SUFFIX_RE.search(hostname)
        return match.group("tld") if match else None

    def scan_chunk(self, session: CrawlSession, chunk: str) -> None:
        session.discovered_ips.extend(self.extract_ips(chunk))
        session.discovered_urls.extend(self.extract_urls(chunk))

    def scan(self, chunks: Iterable[Union[str, bytes]], root_hostname: str) -> CrawlSession:
        """Build a session from a stream of text chunks.

        Chunks are scanned independently, so a match split across a chunk
        boundary is not found.
        """
        session = CrawlSession(root_hostname=root_hostname)
        for chunk in chunks:
            if isinstance(chunk, bytes):
                chunk = chunk.decode("utf-8", errors="replace")
            self.scan_chunk(session, chunk)
        logger.debug(
            f"Scanned page for {root_hostname}: {len(session.discovered_urls)} urls, "
            f"{len(session.discovered_ips)} ips"
        )
        return session
