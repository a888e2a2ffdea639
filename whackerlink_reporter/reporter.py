from __future__ import annotations

import logging
from concurrent.futures import Future, ThreadPoolExecutor
from datetime import tzinfo
from typing import Any, Optional, Protocol

import httpx

from .config import ReporterConfig
from .constants import (
    DEFAULT_TIMEOUT,
    DEFAULT_TIMEZONE,
    DEFAULT_WORKERS,
    JSON_CONTENT_TYPE,
    LOG_PREFIX,
    REPORT_PATH,
    WORKER_THREAD_PREFIX,
)
from .envelopes import (
    ReportEnvelope,
    build_event_report,
    build_site_broadcast_report,
    build_status_broadcast_report,
    serialize_report,
)
from .errors import ReporterConfigurationError
from .models import ResponseType, SiteBroadcastLike, StatusBroadcastLike
from .timestamps import report_timestamp, resolve_timezone


class ReporterLogger(Protocol):
    def info(self, msg: str, *args: Any, **kwargs: Any) -> None: ...
    def error(self, msg: str, *args: Any, **kwargs: Any) -> None: ...


class Reporter:
    """
    Relays radio-network events to an HTTP collector without blocking the caller.

    A disabled reporter allocates nothing and every operation is a no-op. An
    enabled reporter owns one pooled HTTP client and a small thread pool; each
    send is shaped on the calling thread and delivered from the pool. Delivery
    is best-effort: failures are logged and the report is dropped.

    Worker threads are joined at interpreter exit. Owners should call
    ``close(wait=False)`` on shutdown so an unreachable collector cannot hold
    the process open while queued reports time out one by one.
    """

    def __init__(
        self,
        address: str,
        port: int,
        logger: Optional[ReporterLogger] = None,
        enabled: bool = False,
        *,
        timezone: str = DEFAULT_TIMEZONE,
        timeout: float = DEFAULT_TIMEOUT,
        workers: int = DEFAULT_WORKERS,
        log_success: bool = False,
        http_client: Optional[httpx.Client] = None,
    ):
        """
        Initialize the reporter.

        Args:
            address: Collector host name or IP address
            port: Collector TCP port
            logger: Sink for info and error lines, defaults to this module's logger
            enabled: When False nothing is allocated and nothing is sent
            timezone: Zone identifier used to stamp reports
            timeout: HTTP timeout in seconds for each POST
            workers: Number of background delivery threads
            log_success: Log an info line for every delivered report
            http_client: Pre-configured client to post through; it is not closed
                by the reporter

        Raises:
            ReporterConfigurationError: if enabled with invalid settings
            TimezoneNotFoundError: if enabled and the zone cannot be resolved
        """
        self._config = ReporterConfig(
            address=address,
            port=port,
            enabled=enabled,
            timezone=timezone,
            timeout=timeout,
            workers=workers,
            log_success=log_success,
        )
        self.logger: ReporterLogger = logger or logging.getLogger(__name__)

        self._zone: Optional[tzinfo] = None
        self._http_client: Optional[httpx.Client] = None
        self._owns_client = False
        self._pool: Optional[ThreadPoolExecutor] = None
        self._closed = False

        if not enabled:
            return

        if workers < 1:
            raise ReporterConfigurationError("workers", workers, "At least one is needed.")

        if timeout <= 0:
            raise ReporterConfigurationError("timeout", timeout, "Must be positive.")

        self._zone = resolve_timezone(timezone)

        if http_client is None:
            http_client = httpx.Client(base_url=self._config.base_url, timeout=timeout)
            self._owns_client = True

        self._http_client = http_client
        self._pool = ThreadPoolExecutor(
            max_workers=workers, thread_name_prefix=WORKER_THREAD_PREFIX
        )

        self.logger.info(f"Started Reporter at {self._config.base_url}")

    @classmethod
    def from_config(
        cls,
        config: ReporterConfig,
        logger: Optional[ReporterLogger] = None,
        http_client: Optional[httpx.Client] = None,
    ) -> "Reporter":
        return cls(
            config.address,
            config.port,
            logger,
            config.enabled,
            timezone=config.timezone,
            timeout=config.timeout,
            workers=config.workers,
            log_success=config.log_success,
            http_client=http_client,
        )

    @property
    def enabled(self) -> bool:
        return self._config.enabled

    @property
    def config(self) -> ReporterConfig:
        return self._config

    def __enter__(self) -> "Reporter":
        return self

    def __exit__(self, *exc) -> None:
        self.close()

    def send_report(self, report: Any) -> None:
        """
        Post one report to the collector and wait for the response.

        Never raises: a non-success status or any failure on the way is logged
        as an error and the report is dropped.

        Args:
            report: Any JSON-serializable value, usually a ReportEnvelope
        """
        if not self.enabled:
            return

        assert self._http_client is not None

        try:
            content = serialize_report(report)
            response = self._http_client.post(
                REPORT_PATH,
                content=content,
                headers={"Content-Type": JSON_CONTENT_TYPE},
            )

            if response.is_success:
                if self._config.log_success:
                    self.logger.info(f"{LOG_PREFIX} Report sent")
            else:
                self.logger.error(f"{LOG_PREFIX} Failed to send: {response.status_code}")
        except Exception as e:
            self.logger.error(f"{LOG_PREFIX} Error sending report: {e}")

    def submit(self, report: ReportEnvelope) -> Optional[Future]:
        """
        Schedule a report for delivery on the worker pool.

        Returns:
            The delivery future, or None when disabled or closed
        """
        if not self.enabled:
            return None

        assert self._pool is not None

        try:
            return self._pool.submit(self.send_report, report)
        except RuntimeError as e:
            # Pool already shut down
            self.logger.error(f"{LOG_PREFIX} Error sending report: {e}")
            return None

    def send(
        self,
        packet_type: Any,
        src_id: Any,
        dst_id: Any,
        site: Any,
        extra: Any,
        response_type: Any = ResponseType.UNKNOWN,
        lat: Optional[Any] = None,
        long: Optional[Any] = None,
    ) -> None:
        """
        Report a packet event between two radio units.
        """
        if not self.enabled:
            return

        self.submit(
            build_event_report(
                packet_type,
                src_id,
                dst_id,
                site,
                extra,
                timestamp=self._timestamp(),
                response_type=response_type,
                lat=lat,
                long=long,
            )
        )

    def send_site_broadcast(
        self, packet_type: Any, site_broadcast: SiteBroadcastLike
    ) -> None:
        if not self.enabled:
            return

        self.submit(
            build_site_broadcast_report(
                packet_type, site_broadcast, timestamp=self._timestamp()
            )
        )

    def send_status_broadcast(
        self, packet_type: Any, status_broadcast: StatusBroadcastLike
    ) -> None:
        if not self.enabled:
            return

        self.submit(
            build_status_broadcast_report(
                packet_type, status_broadcast, timestamp=self._timestamp()
            )
        )

    def close(self, wait: bool = True) -> None:
        """
        Stop accepting reports and release the worker pool and HTTP client.

        Args:
            wait: Block until in-flight reports have been delivered or dropped.
                When False, reports still queued are discarded.
        """
        if not self.enabled or self._closed:
            return

        self._closed = True

        if self._pool:
            self._pool.shutdown(wait=wait, cancel_futures=not wait)

        if self._http_client and self._owns_client:
            self._http_client.close()

    def _timestamp(self) -> str:
        assert self._zone is not None
        return report_timestamp(self._zone)
