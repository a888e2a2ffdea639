from pathlib import Path

# Collector endpoint
DEFAULT_ADDRESS = "127.0.0.1"
DEFAULT_PORT = 8080
REPORT_PATH = "/"
JSON_CONTENT_TYPE = "application/json"

# Collector-side timestamps are compared in US Central time
DEFAULT_TIMEZONE = "America/Chicago"
TIMESTAMP_TIMESPEC = "milliseconds"

DEFAULT_TIMEOUT = 10.0
DEFAULT_WORKERS = 4
WORKER_THREAD_PREFIX = "whackerlink-reporter"

LOG_PREFIX = "[REPORTER]"

REPORTER_SECTION_NAME = "reporter"
DEFAULT_CONFIG_FILE = Path("config.ini")
