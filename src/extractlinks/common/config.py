"""
Configuration settings for the link extraction tool.
"""

# Worker settings
DEFAULT_THREAD_COUNT = 50

# Links are https URLs made of letters, digits and . / ? = _ -
LINK_PATTERN = r'https://[a-zA-Z0-9./?=_-]+'

# Capacity of the results queue; workers block on a full queue
RESULT_QUEUE_SIZE = 100

# Output settings
OUTPUT_ENCODING = 'utf-8'
BODY_ENCODING = 'utf-8'

# Logging
LOG_FORMAT = '%(asctime)s [%(levelname)s] [%(threadName)s] %(message)s'

USAGE = "Usage: extractlinks -l urllist.txt -o outputfile.txt -t threadCount"

# Exit codes
EXIT_OK = 0
EXIT_LOAD_FAILED = 3
EXIT_OUTPUT_OPEN_FAILED = 4
EXIT_WRITE_FAILED = 5
