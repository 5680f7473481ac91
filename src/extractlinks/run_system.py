"""
Command line entry point for the link extraction tool.
"""
import argparse
import logging
import sys

from extractlinks.common.config import (
    DEFAULT_THREAD_COUNT, EXIT_LOAD_FAILED, EXIT_OK, EXIT_OUTPUT_OPEN_FAILED,
    EXIT_WRITE_FAILED, LOG_FORMAT, USAGE
)
from extractlinks.common.errors import OutputOpenError, ReadError, WriteError
from extractlinks.master.master_node import MasterNode

logger = logging.getLogger(__name__)


def positive_int(value):
    """argparse type for a worker count."""
    try:
        count = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid int value: {value!r}")
    if count < 1:
        raise argparse.ArgumentTypeError(f"thread count must be at least 1, got {count}")
    return count


def build_parser():
    parser = argparse.ArgumentParser(
        prog='extractlinks',
        description='Fetch a list of URLs concurrently and write every https link found in them to a file'
    )
    parser.add_argument('-l', dest='url_list', help='File containing list of URLs')
    parser.add_argument('-o', dest='output', help='Output file to write links')
    parser.add_argument('-t', dest='threads', type=positive_int, default=DEFAULT_THREAD_COUNT,
                        help=f'Number of concurrent threads (default: {DEFAULT_THREAD_COUNT})')
    parser.add_argument('-v', '--verbose', action='store_true', help='Enable debug logging')
    parser.add_argument('--log-file', help='Also write log records to this file')
    return parser


def setup_logging(verbose=False, log_file=None):
    """Configure logging to standard output and optionally a file."""
    handlers = [logging.StreamHandler(sys.stdout)]
    if log_file:
        handlers.append(logging.FileHandler(log_file))
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format=LOG_FORMAT,
        handlers=handlers,
        force=True
    )


def main(argv=None):
    """Main function to run the tool. Returns the process exit code."""
    args = build_parser().parse_args(argv)

    if not args.url_list or not args.output:
        print(USAGE)
        return EXIT_OK

    setup_logging(args.verbose, args.log_file)

    master = MasterNode(thread_count=args.threads)
    try:
        master.run(args.url_list, args.output)
    except ReadError as e:
        logger.error(f"Error reading URL list file: {e}")
        return EXIT_LOAD_FAILED
    except OutputOpenError as e:
        logger.error(f"Error creating output file: {e}")
        return EXIT_OUTPUT_OPEN_FAILED
    except WriteError as e:
        logger.error(f"Error writing to output file: {e}")
        return EXIT_WRITE_FAILED

    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
