"""
Exceptions raised by the link extraction pipeline.
"""


class ExtractLinksError(Exception):
    """Base class for fatal pipeline errors."""

    def __init__(self, path, message):
        super().__init__(message)
        self.path = path


class ReadError(ExtractLinksError):
    """The URL list file could not be opened or read."""


class OutputOpenError(ExtractLinksError):
    """The output file could not be created."""


class WriteError(ExtractLinksError):
    """A write to the output file failed."""
