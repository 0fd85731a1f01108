import os
import tempfile
from dotenv import load_dotenv

load_dotenv()


# Crawler settings
MAX_LEVEL = int(os.getenv("HOST_SCRAPER_MAX_LEVEL", "1"))
CHUNK_SIZE = int(os.getenv("HOST_SCRAPER_CHUNK_SIZE", "1024"))
REQUEST_TIMEOUT = float(os.getenv("HOST_SCRAPER_REQUEST_TIMEOUT", "20"))

# Downloaded pages are written here before scanning
DOWNLOAD_DIR = os.getenv("HOST_SCRAPER_DOWNLOAD_DIR", tempfile.gettempdir())

# Optional IANA tlds-alpha-by-domain.txt, falls back to the built-in list
TLD_FILE = os.getenv("HOST_SCRAPER_TLD_FILE")

DEFAULT_SCHEME = "http://"


HEADERS = {
    "User-Agent": "Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/130.0.0.0 Safari/537.36",
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.5",
    "Connection": "keep-alive",
    "Accept-Encoding": "gzip, deflate",
}


# Classification markers
CDN_MARKERS = ("cloudflare", "cloudfront")
CLOUD_MARKERS = ("aws",)
