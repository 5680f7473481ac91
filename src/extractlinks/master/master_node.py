"""
Master Node for the link extraction tool.
Responsible for loading URLs, distributing them to the crawler threads and
handing their results to the collector.
"""
import enum
import logging
import queue
import threading

from extractlinks.collector.collector_node import Collector
from extractlinks.common.config import (
    DEFAULT_THREAD_COUNT, OUTPUT_ENCODING, RESULT_QUEUE_SIZE
)
from extractlinks.common.errors import OutputOpenError, ReadError, WriteError
from extractlinks.common.stats import CrawlStats
from extractlinks.common.utils import get_memory_usage, read_url_list
from extractlinks.crawler.crawler_node import CrawlerPool

logger = logging.getLogger(__name__)


class RunState(enum.Enum):
    INIT = 'init'
    LOADING = 'loading'
    RUNNING = 'running'
    DRAINING = 'draining'
    DONE = 'done'
    LOAD_FAILED = 'load_failed'
    OUTPUT_OPEN_FAILED = 'output_open_failed'
    WRITE_FAILED = 'write_failed'


class MasterNode:
    """
    Runs one extraction job from a URL list file to an output file.

    Flow: load the URL list, open the output file, queue every URL followed by
    one stop sentinel per crawler, start the collector and the crawlers, wait
    for every crawler, then stop the collector.
    """
    def __init__(self, thread_count=DEFAULT_THREAD_COUNT,
                 result_queue_size=RESULT_QUEUE_SIZE):
        if thread_count < 1:
            raise ValueError(f"thread_count must be at least 1, got {thread_count}")
        self.thread_count = thread_count
        self.result_queue_size = result_queue_size
        self.state = RunState.INIT
        self.stats = None

    def run(self, url_list_path, output_path):
        """
        Fetch every URL in url_list_path and write the links found to output_path.

        Returns:
            CrawlStats: Counters for the finished run

        Raises:
            ReadError: The URL list could not be read
            OutputOpenError: The output file could not be created
            WriteError: Writing to the output file failed
        """
        self.state = RunState.LOADING
        try:
            urls = read_url_list(url_list_path)
        except ReadError:
            self.state = RunState.LOAD_FAILED
            raise
        logger.info(f"Loaded {len(urls)} URLs from {url_list_path}")
        self.stats = CrawlStats(urls_total=len(urls))

        try:
            output_file = open(output_path, 'w', encoding=OUTPUT_ENCODING, newline='\n')
        except OSError as e:
            self.state = RunState.OUTPUT_OPEN_FAILED
            raise OutputOpenError(output_path, f"{output_path}: {e}") from e

        try:
            self._crawl(urls, output_file)
        finally:
            self._close_output(output_file, output_path)

        logger.info(f"Links successfully written to {output_path}")
        return self.stats

    def _close_output(self, output_file, output_path):
        try:
            output_file.close()
        except OSError as e:
            if self.state is RunState.WRITE_FAILED:
                # The write error that got us here is the one to report
                logger.error(f"Error closing output file {output_path}: {e}")
                return
            self.state = RunState.WRITE_FAILED
            raise WriteError(output_path, f"{output_path}: {e}") from e

    def _crawl(self, urls, output_file):
        self.state = RunState.RUNNING

        # Sized so that enqueuing every URL and sentinel never blocks
        url_queue = queue.Queue(maxsize=len(urls) + self.thread_count)
        for url in urls:
            url_queue.put(url)
        for _ in range(self.thread_count):
            url_queue.put(None)

        result_queue = queue.Queue(maxsize=self.result_queue_size)
        # Set by the collector on a write failure, or by the pool if a crawler fails to start
        abort_event = threading.Event()

        # The collector must be consuming before any crawler can block on a put
        collector = Collector(result_queue, output_file, self.stats, abort_event)
        collector.start()

        pool = CrawlerPool(self.thread_count, url_queue, result_queue, self.stats, abort_event)
        try:
            pool.start()
            self.state = RunState.DRAINING
        finally:
            # Runs even if a crawler failed to start, so no thread outlives the file
            pool.join()
            result_queue.put(None)
            collector.join()

        stats = self.stats.as_dict()
        logger.info(
            f"Crawl finished: {stats['urls_fetched']} fetched, "
            f"{stats['urls_failed']} failed, {stats['links_written']} links written "
            f"(memory usage: {get_memory_usage():.1f}MB)"
        )

        if collector.error is not None:
            self.state = RunState.WRITE_FAILED
            raise collector.error

        self.state = RunState.DONE
