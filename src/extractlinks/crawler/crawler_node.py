"""
Crawler Node for the link extraction tool.
Responsible for fetching web pages and extracting links from them.
"""
import logging
import threading
import traceback

import requests

from extractlinks.common.config import BODY_ENCODING
from extractlinks.common.utils import extract_links

logger = logging.getLogger(__name__)


class CrawlerNode(threading.Thread):
    """
    Worker thread that pulls URLs from the task queue, fetches each page and
    pushes the links found in it onto the result queue.

    A None item on the task queue tells the worker to stop. Once abort_event
    is set the remaining URLs are taken off the queue without being fetched.
    """
    def __init__(self, crawler_id, url_queue, result_queue, stats, abort_event=None):
        super().__init__(name=f"crawler-{crawler_id}")
        self.crawler_id = crawler_id
        self.url_queue = url_queue
        self.result_queue = result_queue
        self.stats = stats
        self.abort_event = abort_event or threading.Event()
        self.session = requests.Session()

    def run(self):
        """Main loop: take a URL, crawl it, until the stop sentinel arrives."""
        logger.debug(f"Crawler {self.crawler_id} started")
        try:
            while True:
                url = self.url_queue.get()
                if url is None:
                    break
                if self.abort_event.is_set():
                    logger.debug(f"Run aborted, skipping {url}")
                    continue
                try:
                    self._process_url(url)
                except Exception as e:
                    logger.error(f"Error processing URL {url}: {e}")
                    logger.error(traceback.format_exc())
                    self.stats.record_failed()
        finally:
            self.session.close()
            logger.debug(f"Crawler {self.crawler_id} stopped")

    def _process_url(self, url):
        body = self.fetch_page(url)
        if body is None:
            self.stats.record_failed()
            return

        links = extract_links(body)
        self.stats.record_fetched()
        logger.debug(f"Found {len(links)} links in {url}")

        # Blocks while the collector is behind
        self.result_queue.put(links)

    def fetch_page(self, url):
        """
        Download a page and return its body as text.

        Args:
            url (str): The URL to fetch

        Returns:
            str or None: The decoded body, or None if the fetch or the body
            read failed
        """
        try:
            response = self.session.get(url, stream=True)
        except requests.RequestException as e:
            logger.error(f"Error fetching URL {url}: {e}")
            return None

        try:
            content = response.content
        except requests.RequestException as e:
            logger.error(f"Error reading response body for URL {url}: {e}")
            return None
        finally:
            response.close()

        return content.decode(BODY_ENCODING, errors='replace')


class CrawlerPool:
    """Fixed-size set of crawler threads sharing one task queue."""

    def __init__(self, count, url_queue, result_queue, stats, abort_event=None):
        if count < 1:
            raise ValueError(f"crawler count must be at least 1, got {count}")
        self.abort_event = abort_event or threading.Event()
        self.crawlers = [
            CrawlerNode(i, url_queue, result_queue, stats, self.abort_event)
            for i in range(count)
        ]

    def start(self):
        """Start every crawler; if one fails to start the others are told to abort."""
        try:
            for crawler in self.crawlers:
                crawler.start()
        except Exception:
            self.abort_event.set()
            raise
        logger.info(f"Started {len(self.crawlers)} crawler threads")

    def join(self):
        """Wait for every crawler thread that was started to finish."""
        for crawler in self.crawlers:
            if crawler.ident is not None:
                crawler.join()
        logger.info("All crawler threads finished")
