"""
Log codes for configuration-related operations.
"""

CONFIG = "config"

# Reporter Configuration
REPORTER = f"{CONFIG}.reporter"
REPORTER_RESOLVED = f"{REPORTER}.resolved"
REPORTER_FILE_MISSING = f"{REPORTER}.file_missing"
REPORTER_MISSING_SECTION = f"{REPORTER}.missing_section"
REPORTER_ADDRESS_EMPTY = f"{REPORTER}.address_empty"
REPORTER_PORT_INVALID = f"{REPORTER}.invalid_port"
REPORTER_TIMEOUT_INVALID = f"{REPORTER}.invalid_timeout"
REPORTER_WORKERS_INVALID = f"{REPORTER}.invalid_workers"
