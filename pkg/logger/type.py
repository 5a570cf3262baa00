from dataclasses import dataclass

from .constant import *


@dataclass
class LoggerConfig:
    """Logger configuration.

    Attributes:
        level: Minimum log level (DEBUG, INFO, WARNING, ERROR)
        enable_console: Write records to stdout
        colorize: Colour console output
        service_name: Value stamped into every record's ``service`` field
    """

    level: LogLevel = DEFAULT_LEVEL
    enable_console: bool = DEFAULT_ENABLE_CONSOLE
    colorize: bool = DEFAULT_COLORIZE
    service_name: str = DEFAULT_SERVICE_NAME

    def __post_init__(self):
        if isinstance(self.level, str) and not isinstance(self.level, LogLevel):
            name = self.level.upper()
            name = LEVEL_ALIASES.get(name, name)
            try:
                self.level = LogLevel(name)
            except ValueError:
                valid_levels = [l.value for l in LogLevel]
                raise ValueError(
                    f"Invalid log level: {self.level}. Must be one of {valid_levels}"
                )
        if not self.service_name:
            raise ValueError("service_name cannot be empty")


__all__ = ["LoggerConfig"]
