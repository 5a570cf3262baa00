import sys
from typing import Iterator, Optional, Protocol, runtime_checkable
from contextvars import ContextVar
from contextlib import contextmanager
from loguru import logger as _loguru_logger  # type: ignore

from .constant import *
from .type import LoggerConfig

# Job id of the analytics run currently executing (async-safe)
_job_id_var: ContextVar[Optional[str]] = ContextVar(JOB_ID_KEY, default=None)


@runtime_checkable
class ILogger(Protocol):
    """Protocol defining the Logger interface."""

    def job_context(self, job_id: str) -> Iterator[None]: ...

    def get_job_id(self) -> Optional[str]: ...

    def debug(self, message: str, **kwargs) -> None: ...

    def info(self, message: str, **kwargs) -> None: ...

    def warning(self, message: str, **kwargs) -> None: ...

    def error(self, message: str, **kwargs) -> None: ...

    def exception(self, message: str, **kwargs) -> None: ...


class Logger(ILogger):
    """Loguru wrapper that stamps the service name and current job id.

    Usage:
        logger = Logger(LoggerConfig(level="INFO"))

        with logger.job_context("google:profile-1"):
            logger.info("[ReviewAnalytics] Processing")
    """

    def __init__(self, config: LoggerConfig):
        self.config = config
        self._loguru = _loguru_logger.bind(**{SERVICE_KEY: config.service_name})

        _loguru_logger.remove()

        if self.config.enable_console:
            self._add_console_handler()

    def _add_console_handler(self) -> None:
        def attach_job_id(record):
            record["extra"][JOB_ID_KEY] = _job_id_var.get() or "-"
            record["extra"].setdefault(SERVICE_KEY, self.config.service_name)
            return True

        format_str = (
            f"{LOG_FORMAT_TIME} | {LOG_FORMAT_LEVEL} | {LOG_FORMAT_SERVICE} | "
            f"{LOG_FORMAT_JOB} | {LOG_FORMAT_LOCATION} - {LOG_FORMAT_MESSAGE}"
        )

        _loguru_logger.add(
            sys.stdout,
            colorize=self.config.colorize,
            format=format_str,
            level=self.config.level.value,
            filter=attach_job_id,
        )

    @contextmanager
    def job_context(self, job_id: str):
        """Tag every record logged inside the block with ``job_id``."""
        token = _job_id_var.set(job_id)
        try:
            yield
        finally:
            _job_id_var.reset(token)

    def get_job_id(self) -> Optional[str]:
        return _job_id_var.get()

    # opt(depth=1) so the location column points at the caller, not this wrapper
    def debug(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).debug(message, **kwargs)

    def info(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).info(message, **kwargs)

    def warning(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).warning(message, **kwargs)

    def error(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).error(message, **kwargs)

    def exception(self, message: str, **kwargs) -> None:
        self._loguru.opt(depth=1).exception(message, **kwargs)


__all__ = [
    "Logger",
    "ILogger",
    "LoggerConfig",
]
