import logging
from typing import Protocol

logger = logging.getLogger(__name__)


class MetricsHook(Protocol):
    def record_latency(
        self,
        name: str,
        value_ms: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def increment(
        self,
        name: str,
        value: int = 1,
        labels: dict[str, str] | None = None,
    ) -> None: ...

    def record_gauge(
        self,
        name: str,
        value: float,
        labels: dict[str, str] | None = None,
    ) -> None: ...


class NoOpMetricsHook:
    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        pass

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        pass


class LoggingMetricsHook:
    """Emits every metric as a DEBUG log record.

    Useful from the CLI, where there is no metrics backend but `--verbose`
    should still show how long indexing and queries took.
    """

    def __init__(self, level: int = logging.DEBUG) -> None:
        self._level = level

    def record_latency(
        self, name: str, value_ms: float, labels: dict[str, str] | None = None
    ) -> None:
        logger.log(self._level, "%s=%.2fms %s", name, value_ms, _fmt(labels))

    def increment(
        self, name: str, value: int = 1, labels: dict[str, str] | None = None
    ) -> None:
        logger.log(self._level, "%s+=%d %s", name, value, _fmt(labels))

    def record_gauge(
        self, name: str, value: float, labels: dict[str, str] | None = None
    ) -> None:
        logger.log(self._level, "%s=%s %s", name, value, _fmt(labels))


def _fmt(labels: dict[str, str] | None) -> str:
    if not labels:
        return ""
    return " ".join(f"{k}={v}" for k, v in sorted(labels.items()))
