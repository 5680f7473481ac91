"""
Utility functions for the link extraction tool.
"""
import re

import psutil

from extractlinks.common.config import LINK_PATTERN
from extractlinks.common.errors import ReadError

LINK_REGEX = re.compile(LINK_PATTERN)


def read_url_list(path):
    """
    Read a newline-delimited URL list.

    Args:
        path (str): Path to the URL list file

    Returns:
        list[str]: One entry per line in file order, blank lines kept as ''.
        Bytes that are not valid UTF-8 become U+FFFD instead of failing the load.

    Raises:
        ReadError: If the file cannot be opened or read
    """
    try:
        with open(path, 'r', encoding='utf-8', errors='replace', newline='') as f:
            data = f.read()
    except OSError as e:
        raise ReadError(path, f"{path}: {e}") from e

    lines = data.split('\n')
    # A trailing newline terminates the last line, it does not open a new one
    if lines[-1] == '':
        lines.pop()
    return [line[:-1] if line.endswith('\r') else line for line in lines]


def extract_links(text):
    """Return every link in text, left to right, non-overlapping."""
    return LINK_REGEX.findall(text)


def get_memory_usage():
    """Get current memory usage of the process in MB."""
    try:
        return psutil.Process().memory_info().rss / 1024 / 1024
    except psutil.Error:
        return 0
