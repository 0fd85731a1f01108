"""
Entry point for the host scraper.
Run with: python -m host_scraper (--site URL | --file PATH --hostname HOST | --site-list PATH) [-v]
"""

import logging
import argparse
import sys
from .errors import ScraperError
from .scraper import ScrapeController
from .tlds import TLDRegistry
from . import config

logger = logging.getLogger(__name__)

LOG_LEVELS = [logging.WARNING, logging.INFO, logging.DEBUG]


def parse_arguments(argv=None):
    parser = argparse.ArgumentParser(description="Scrape a page for hostnames, URLs and IPs")
    target = parser.add_mutually_exclusive_group(required=True)
    target.add_argument("--site", type=str, help="Site URL to download and scrape")
    target.add_argument("--file", type=str, help="Local page dump to scrape")
    target.add_argument("--site-list", type=str, help="File with one site per line (not implemented)")
    parser.add_argument("--hostname", type=str, default="", help="Hostname the local page dump belongs to")
    parser.add_argument("--max-level", type=int, default=config.MAX_LEVEL, help="Maximum recursion depth")
    parser.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (-v, -vv)")
    return parser.parse_args(argv)


def configure_logging(verbose: int) -> None:
    level = LOG_LEVELS[min(verbose, len(LOG_LEVELS) - 1)]
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )


def load_registry() -> TLDRegistry:
    if config.TLD_FILE:
        return TLDRegistry.from_file(config.TLD_FILE)
    return TLDRegistry.default()


def main(argv=None) -> int:
    """Main entry point for the scraper."""
    args = parse_arguments(argv)
    configure_logging(args.verbose)

    try:
        registry = load_registry()
    except OSError as e:
        logger.error(f"Could not load TLD list: {str(e)}")
        return 1

    controller = ScrapeController(registry, max_level=args.max_level)
    try:
        if args.site is not None:
            logger.info(f"Starting scrape of {args.site}")
            controller.scrape_site(args.site)
        elif args.file is not None:
            controller.scrape_local_file(args.hostname, args.file)
        else:
            controller.scrape_site_list(args.site_list)

    except ScraperError as e:
        logger.error(f"Scraper encountered a critical error: {str(e)}")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
