import io
import os
import shutil
import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock
from host_scraper.errors import EmptyTargetError, FetchError
from host_scraper.fetcher import Fetcher
from host_scraper.scraper import ScrapeController, root_hostname
from host_scraper.tlds import TLDRegistry

ROOT_PAGE = """
<script src="https://cdn.cloudflare.com/a.js"></script>
<script src="https://cdn.cloudflare.com/b.js"></script>
<script src="https://cdn.cloudflare.com/c.js"></script>
"""


def fake_download(pages):
    """Write the page registered for a target, or fail like a dead host."""

    def _download(target, path):
        if target not in pages:
            raise FetchError(f"Download did not work: {target}")
        Path(path).write_text(pages[target], encoding="utf-8")
        return Path(path)

    return _download


class TestScrapeController(unittest.TestCase):
    def setUp(self):
        """Set up test fixtures before each test method."""
        self.tmp = tempfile.mkdtemp()
        self.output = io.StringIO()
        self.mock_fetcher = MagicMock(spec=Fetcher)

    def tearDown(self):
        shutil.rmtree(self.tmp)

    def make_controller(self, pages, max_level=1):
        self.mock_fetcher.download.side_effect = fake_download(pages)
        return ScrapeController(
            TLDRegistry.default(),
            fetcher=self.mock_fetcher,
            max_level=max_level,
            download_dir=self.tmp,
            output=self.output,
        )

    def downloaded_targets(self):
        return [call.args[0] for call in self.mock_fetcher.download.call_args_list]

    def write_page(self, name, text):
        path = os.path.join(self.tmp, name)
        with open(path, "w", encoding="utf-8") as f:
            f.write(text)
        return path

    def test_max_level_one_follows_a_single_url(self):
        """Test only the first of three followable scripts is fetched at max level 1."""
        pages = {
            "root.com": ROOT_PAGE,
            "cdn.cloudflare.com/a.js": "'cdn.cloudflare.com/deeper.js'",
        }
        controller = self.make_controller(pages, max_level=1)

        result = controller.scrape_site("root.com")

        self.assertEqual(self.downloaded_targets(), ["root.com", "cdn.cloudflare.com/a.js"])
        self.assertEqual(result["depth"], 0)
        self.assertEqual(len(result["children"]), 1)
        child = result["children"][0]
        self.assertEqual(child["target"], "cdn.cloudflare.com/a.js")
        self.assertEqual(child["depth"], 1)
        self.assertEqual(child["children"], [])
        self.assertTrue(child["discovered_urls"][0].follow)

    def test_each_followed_url_uses_one_level(self):
        pages = {
            "root.com": ROOT_PAGE,
            "cdn.cloudflare.com/a.js": "'cdn.cloudflare.com/x.js'",
            "cdn.cloudflare.com/x.js": "'cdn.cloudflare.com/y.js'",
            "cdn.cloudflare.com/b.js": "'cdn.cloudflare.com/z.js'",
        }
        controller = self.make_controller(pages, max_level=2)

        result = controller.scrape_site("root.com")

        self.assertEqual(
            self.downloaded_targets(),
            ["root.com", "cdn.cloudflare.com/a.js", "cdn.cloudflare.com/x.js", "cdn.cloudflare.com/b.js"],
        )
        self.assertEqual([c["depth"] for c in result["children"]], [1, 2])

    def test_max_level_zero_does_not_recurse(self):
        controller = self.make_controller({"root.com": ROOT_PAGE}, max_level=0)

        result = controller.scrape_site("root.com")

        self.assertEqual(self.downloaded_targets(), ["root.com"])
        self.assertEqual(result["children"], [])
        self.assertTrue(all(u.follow for u in result["discovered_urls"]))

    def test_root_fetch_failure_is_raised(self):
        controller = self.make_controller({})
        with self.assertRaises(FetchError):
            controller.scrape_site("unreachable.com")

    def test_child_failure_does_not_stop_siblings(self):
        """Test a failed recursive fetch is recorded and the next sibling is still tried."""
        pages = {"root.com": ROOT_PAGE, "cdn.cloudflare.com/b.js": ""}
        controller = self.make_controller(pages, max_level=2)

        result = controller.scrape_site("root.com")

        self.assertEqual(
            self.downloaded_targets(),
            ["root.com", "cdn.cloudflare.com/a.js", "cdn.cloudflare.com/b.js"],
        )
        self.assertEqual(result["failed"], ["cdn.cloudflare.com/a.js"])
        self.assertEqual([c["target"] for c in result["children"]], ["cdn.cloudflare.com/b.js"])

    def test_cloud_hostnames_written_in_discovery_order(self):
        pages = {
            "root.com": '<img src="https://mybucket.s3.amazonaws.com/logo.png"> "cdn.cloudflare.com/aws-sdk.js"',
            "cdn.cloudflare.com/aws-sdk.js": "",
        }
        controller = self.make_controller(pages, max_level=1)

        result = controller.scrape_site("root.com")

        self.assertEqual(self.output.getvalue(), "mybucket.s3.amazonaws.com\ncdn.cloudflare.com\n")
        self.assertEqual(result["cloud_hostnames"], ["mybucket.s3.amazonaws.com", "cdn.cloudflare.com"])

    def test_cloud_hostnames_written_without_following(self):
        pages = {"root.com": "'cdn.cloudflare.com/aws-sdk.js'"}
        controller = self.make_controller(pages, max_level=0)

        controller.scrape_site("root.com")

        self.assertEqual(self.output.getvalue(), "cdn.cloudflare.com\n")

    def test_same_site_script_is_followed(self):
        pages = {
            "http://example.com": "<script src='/static.example.com/app.js'></script> 'other.org/app.js'",
            "static.example.com/app.js": "",
        }
        controller = self.make_controller(pages)

        result = controller.scrape_site("http://example.com")

        self.assertEqual(result["root_hostname"], "example.com")
        self.assertEqual(self.downloaded_targets(), ["http://example.com", "static.example.com/app.js"])

    def test_same_site_script_on_host_starting_with_http(self):
        pages = {"httpbin.org": "'httpbin.org/app.js'", "httpbin.org/app.js": ""}
        controller = self.make_controller(pages)

        result = controller.scrape_site("httpbin.org")

        self.assertEqual(result["root_hostname"], "httpbin.org")
        self.assertEqual(self.downloaded_targets(), ["httpbin.org", "httpbin.org/app.js"])

    def test_scrape_local_file(self):
        path = self.write_page("dump.html", "'example.com/app.js' 10.0.0.5 'cdn.example.org/data.json'")
        controller = self.make_controller({"example.com/app.js": ""})

        result = controller.scrape_local_file("example.com", path)

        self.assertEqual(result["discovered_ips"], ["10.0.0.5"])
        self.assertEqual([u.follow for u in result["discovered_urls"]], [True, False])
        self.assertEqual(self.downloaded_targets(), ["example.com/app.js"])

    def test_scrape_local_file_empty_filename(self):
        controller = self.make_controller({})
        with self.assertRaises(EmptyTargetError):
            controller.scrape_local_file("example.com", "")
        self.mock_fetcher.download.assert_not_called()

    def test_scrape_local_file_missing(self):
        controller = self.make_controller({})
        with self.assertRaises(FetchError):
            controller.scrape_local_file("example.com", os.path.join(self.tmp, "missing.html"))

    def test_small_chunks_miss_split_matches(self):
        path = self.write_page("dump.html", "'example.com/app.js'")
        controller = self.make_controller({})
        controller.chunk_size = 8

        result = controller.scrape_local_file("example.com", path)

        self.assertEqual(result["discovered_urls"], [])

    def test_controller_can_be_reused(self):
        """Test the depth budget starts fresh for every top level scrape."""
        pages = {"root.com": ROOT_PAGE, "cdn.cloudflare.com/a.js": ""}
        controller = self.make_controller(pages, max_level=1)

        controller.scrape_site("root.com")
        controller.scrape_site("root.com")

        self.assertEqual(
            self.downloaded_targets(),
            ["root.com", "cdn.cloudflare.com/a.js", "root.com", "cdn.cloudflare.com/a.js"],
        )

    def test_scrape_site_list_is_a_placeholder(self):
        controller = self.make_controller({})
        self.assertIsNone(controller.scrape_site_list("sites.txt"))
        self.mock_fetcher.download.assert_not_called()


class TestRootHostname(unittest.TestCase):
    def test_root_hostname(self):
        self.assertEqual(root_hostname("example.com"), "example.com")
        self.assertEqual(root_hostname("cdn.cloudflare.com/lib.js?v=2"), "cdn.cloudflare.com")
        self.assertEqual(root_hostname("https://Example.com/path"), "example.com")
        self.assertEqual(root_hostname("httpbin.org/app.js"), "httpbin.org")
        self.assertEqual(root_hostname("httpstatic.example.com/app.js"), "httpstatic.example.com")


if __name__ == "__main__":
    unittest.main()
