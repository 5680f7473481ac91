"""
Collector Node for the link extraction tool.
Single writer that drains the result queue into the output file.
"""
import logging
import threading
import traceback

from extractlinks.common.errors import WriteError

logger = logging.getLogger(__name__)


class Collector(threading.Thread):
    """
    Drains link batches from the result queue and appends them to the output
    file, one link per line, flushing after every batch.

    A None item on the result queue means no more batches will arrive.
    If a write fails the error is kept in self.error, abort_event is set so
    the crawlers stop fetching, nothing more is written, and the queue is
    still drained so that blocked crawlers can finish.
    """
    def __init__(self, result_queue, output_file, stats=None, abort_event=None):
        super().__init__(name="collector")
        self.result_queue = result_queue
        self.output_file = output_file
        self.stats = stats
        self.abort_event = abort_event or threading.Event()
        self.error = None

    def run(self):
        while True:
            links = self.result_queue.get()
            if links is None:
                break
            if self.error is not None:
                continue
            try:
                self.write_batch(links)
            except WriteError as e:
                self._fail(e)
            except Exception as e:
                logger.error(traceback.format_exc())
                error = WriteError(self._output_name(), f"unexpected error: {e}")
                error.__cause__ = e
                self._fail(error)

    def _fail(self, error):
        logger.warning("Output write failed, aborting crawl and discarding remaining results")
        self.error = error
        self.abort_event.set()

    def _output_name(self):
        return getattr(self.output_file, 'name', None)

    def write_batch(self, links):
        """Write one batch of links and flush it to the file."""
        try:
            for link in links:
                self.output_file.write(link + '\n')
            self.output_file.flush()
        except (OSError, ValueError) as e:
            raise WriteError(self._output_name(), str(e)) from e

        if self.stats is not None:
            self.stats.record_written(len(links))
