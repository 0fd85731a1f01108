"""
Fetches pages over HTTP and reads page dumps back in fixed-size chunks.
"""

import logging
import re
from pathlib import Path
from typing import Iterator, Optional, Union

import certifi
import requests

from .errors import FetchError, ReadError
from . import config

logger = logging.getLogger(__name__)


def with_scheme(target: str) -> str:
    """Prepend the default scheme to targets such as ``example.com/app.js``."""
    if re.match(r"^https?://", target, re.IGNORECASE):
        return target
    return config.DEFAULT_SCHEME + target


def download_path(target: str, directory: Union[str, Path, None] = None) -> Path:
    """Per-target file name inside the download directory."""
    directory = Path(directory or config.DOWNLOAD_DIR)
    slug = re.sub(r"[^A-Za-z0-9._-]+", "_", target).strip("_")[:200] or "page"
    return directory / f"scraped-url-for-{slug}.txt"


def read_chunks(path: Union[str, Path], chunk_size: int = config.CHUNK_SIZE) -> Iterator[bytes]:
    """Yield the file's bytes in chunks of at most ``chunk_size``.

    Raises:
        FetchError: the file could not be opened.
        ReadError: a read failed after the file was opened.
    """
    try:
        f = open(path, "rb")
    except OSError as e:
        raise FetchError(f"File could not be opened: {path}") from e

    with f:
        while True:
            try:
                chunk = f.read(chunk_size)
            except OSError as e:
                raise ReadError(f"Error during file read: {path}") from e
            if not chunk:
                break
            yield chunk


class Fetcher:
    def __init__(self, session: Optional[requests.Session] = None, timeout: float = config.REQUEST_TIMEOUT) -> None:
        self.session = session or self._init_session()
        self.timeout = timeout

    def _init_session(self) -> requests.Session:
        """Initialize and configure the HTTP session."""
        session = requests.Session()
        session.headers.update(config.HEADERS)
        return session

    def _get(self, target: str, stream: bool = False) -> requests.Response:
        url = with_scheme(target)
        logger.debug(f"Attempting to fetch URL: {url}")
        try:
            response = self.session.get(
                url, timeout=self.timeout, allow_redirects=True, stream=stream, verify=certifi.where()
            )
            response.raise_for_status()
        except requests.RequestException as e:
            logger.error(f"Error fetching URL {url}: {e}")
            raise FetchError(f"Download did not work: {url}") from e
        return response

    def fetch(self, target: str) -> bytes:
        """Return the body of ``target`` in memory.

        The controller scans pages from disk through ``download``; this is the
        in-memory alternative for callers that only want the bytes.
        """
        response = self._get(target)
        logger.info(f"Successfully fetched page: {response.url}")
        return response.content

    def download(self, target: str, path: Union[str, Path]) -> Path:
        """Stream the body of ``target`` into ``path``."""
        path = Path(path)
        response = self._get(target, stream=True)
        try:
            with response, open(path, "wb") as out:
                for block in response.iter_content(chunk_size=8192):
                    out.write(block)
        except requests.RequestException as e:
            raise FetchError(f"Download did not work: {target}") from e
        except OSError as e:
            raise FetchError(f"Could not write {path}") from e
        logger.info(f"Downloaded {target} to {path}")
        return path
