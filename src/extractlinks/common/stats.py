"""
Run counters shared by the crawler threads and the collector.
"""
import threading


class CrawlStats:
    """Thread-safe counters for one run."""

    def __init__(self, urls_total=0):
        self.urls_total = urls_total
        self.urls_fetched = 0
        self.urls_failed = 0
        self.links_written = 0
        self._lock = threading.Lock()

    def record_fetched(self):
        with self._lock:
            self.urls_fetched += 1

    def record_failed(self):
        with self._lock:
            self.urls_failed += 1

    def record_written(self, count):
        with self._lock:
            self.links_written += count

    def as_dict(self):
        with self._lock:
            return {
                'urls_total': self.urls_total,
                'urls_fetched': self.urls_fetched,
                'urls_failed': self.urls_failed,
                'links_written': self.links_written,
            }
