from typing import NamedTuple, Optional, Union
from pathlib import Path

from whackerlink_reporter.constants import (
    DEFAULT_ADDRESS,
    DEFAULT_CONFIG_FILE,
    DEFAULT_PORT,
    DEFAULT_TIMEOUT,
    DEFAULT_TIMEZONE,
    DEFAULT_WORKERS,
    REPORTER_SECTION_NAME,
)
from .log_codes import (
    REPORTER_RESOLVED,
    REPORTER_FILE_MISSING,
    REPORTER_MISSING_SECTION,
    REPORTER_ADDRESS_EMPTY,
    REPORTER_PORT_INVALID,
    REPORTER_TIMEOUT_INVALID,
    REPORTER_WORKERS_INVALID,
)

import configparser

import logging

logger = logging.getLogger(__name__)


ENABLED_KEY = "enabled"
ADDRESS_KEY = "address"
PORT_KEY = "port"
TIMEZONE_KEY = "timezone"
TIMEOUT_KEY = "timeout"
WORKERS_KEY = "workers"
LOG_SUCCESS_KEY = "log_success"


class ReporterConfig(NamedTuple):
    """
    Settings for a Reporter. Immutable once built.

    Args:
        address (str): Collector host name or IP address.
        port (int): Collector TCP port.
        enabled (bool): When False the reporter never touches the network.
        timezone (str): Zone identifier used to stamp reports.
        timeout (float): HTTP timeout in seconds for each POST.
        workers (int): Number of background delivery threads.
        log_success (bool): Log an info line for every delivered report.
    """

    address: str = DEFAULT_ADDRESS
    port: int = DEFAULT_PORT
    enabled: bool = False
    timezone: str = DEFAULT_TIMEZONE
    timeout: float = DEFAULT_TIMEOUT
    workers: int = DEFAULT_WORKERS
    log_success: bool = False

    @property
    def base_url(self) -> str:
        return f"http://{self.address}:{self.port}"

    def as_dict(self) -> dict[str, Union[str, int, float, bool]]:
        return {
            ENABLED_KEY: self.enabled,
            ADDRESS_KEY: self.address,
            PORT_KEY: self.port,
            TIMEZONE_KEY: self.timezone,
            TIMEOUT_KEY: self.timeout,
            WORKERS_KEY: self.workers,
            LOG_SUCCESS_KEY: self.log_success,
        }


def _validate_address(address: Optional[str], source: str) -> str:
    if not address or not address.strip():
        logger.error(REPORTER_ADDRESS_EMPTY, extra={"source": source})
        raise ValueError("Reporter address must not be empty")

    return address.strip()


def _validate_port(port: Union[str, int, None], source: str) -> int:
    try:
        port_val = int(port)  # type: ignore[arg-type]
    except (TypeError, ValueError):
        logger.error(REPORTER_PORT_INVALID, extra={"port": port, "source": source})
        raise ValueError("Reporter port must be an integer")

    if not 0 < port_val < 65536:
        logger.error(REPORTER_PORT_INVALID, extra={"port": port, "source": source})
        raise ValueError(f"Reporter port out of range: {port_val}")

    return port_val


def _validate_timeout(timeout: float, source: str) -> float:
    if timeout <= 0:
        logger.error(
            REPORTER_TIMEOUT_INVALID, extra={"timeout": timeout, "source": source}
        )
        raise ValueError("Reporter timeout must be greater than zero")

    return timeout


def _validate_workers(workers: int, source: str) -> int:
    if workers < 1:
        logger.error(
            REPORTER_WORKERS_INVALID, extra={"workers": workers, "source": source}
        )
        raise ValueError("Reporter needs at least one worker")

    return workers


def _reporter_from_config_ini(config_path: Path) -> Optional[ReporterConfig]:
    """
    Retrieve the reporter configuration from a config.ini file.

    Args:
        config_path (Path): The path to the config.ini file.

    Returns:
        Optional[ReporterConfig]: The reporter configuration, or None if the file
        or the [reporter] section is missing.

    Raises:
        ValueError: If the section holds invalid values.
    """
    config = configparser.ConfigParser()
    config_files = config.read(filenames=[config_path])

    if not config_files:
        logger.debug(REPORTER_FILE_MISSING, extra={"config_path": str(config_path)})
        return None

    if not config.has_section(REPORTER_SECTION_NAME):
        logger.debug(
            REPORTER_MISSING_SECTION, extra={"config_path": str(config_path)}
        )
        return None

    section = config[REPORTER_SECTION_NAME]
    source = "config"

    try:
        enabled = section.getboolean(ENABLED_KEY, fallback=False)
        log_success = section.getboolean(LOG_SUCCESS_KEY, fallback=False)
        timeout = section.getfloat(TIMEOUT_KEY, fallback=DEFAULT_TIMEOUT)
        workers = section.getint(WORKERS_KEY, fallback=DEFAULT_WORKERS)
    except ValueError as e:
        raise ValueError(f"Invalid value in [{REPORTER_SECTION_NAME}] section: {e}")

    address = section.get(ADDRESS_KEY, None)
    if enabled:
        address = _validate_address(address, source)
    elif address is None or not address.strip():
        address = DEFAULT_ADDRESS
    else:
        address = address.strip()

    return ReporterConfig(
        address=address,
        port=_validate_port(section.get(PORT_KEY, DEFAULT_PORT), source),
        enabled=enabled,
        timezone=section.get(TIMEZONE_KEY, DEFAULT_TIMEZONE).strip(),
        timeout=_validate_timeout(timeout, source),
        workers=_validate_workers(workers, source),
        log_success=log_success,
    )


def load_reporter_config(config_path: Path = DEFAULT_CONFIG_FILE) -> ReporterConfig:
    """
    Load the reporter configuration owned by the application.

    A missing file or section yields a disabled configuration.

    Args:
        config_path (Path): The path to the application's config.ini file.

    Returns:
        ReporterConfig: The loaded configuration.
    """
    return _reporter_from_config_ini(Path(config_path)) or ReporterConfig()


def get_reporter_config(
    address: Optional[str] = None,
    port: Optional[Union[str, int]] = None,
    enabled: Optional[bool] = None,
    config_path: Optional[Path] = None,
) -> ReporterConfig:
    """
    Resolve the effective reporter configuration.

    Resolution order (first non-None wins):
      1. Explicit arguments
      2. config.ini file, when a path is given
      3. Defaults (disabled)

    Args:
        address (Optional[str]): Collector address override.
        port (Optional[Union[str, int]]): Collector port override.
        enabled (Optional[bool]): Enabled flag override.
        config_path (Optional[Path]): The path to the config.ini file.

    Returns:
        ReporterConfig: The resolved configuration.

    Raises:
        ValueError: If the resulting configuration is invalid.
    """
    base = load_reporter_config(config_path) if config_path else ReporterConfig()
    overrides = {}

    if address is not None:
        overrides[ADDRESS_KEY] = _validate_address(address, "arguments")

    if port is not None:
        overrides[PORT_KEY] = _validate_port(port, "arguments")

    if enabled is not None:
        overrides[ENABLED_KEY] = enabled

    resolved = base._replace(**overrides)

    logger.debug(REPORTER_RESOLVED, extra=resolved.as_dict())

    return resolved
