from enum import Enum


class LogLevel(str, Enum):
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


DEFAULT_SERVICE_NAME = "review-analytics"
DEFAULT_LEVEL = LogLevel.INFO
DEFAULT_ENABLE_CONSOLE = True
DEFAULT_COLORIZE = True

# Loguru names the level WARNING; config files often say WARN
LEVEL_ALIASES = {"WARN": LogLevel.WARNING.value}

LOG_FORMAT_TIME = "<green>{time:YYYY-MM-DD HH:mm:ss}</green>"
LOG_FORMAT_LEVEL = "<level>{level: <7}</level>"
LOG_FORMAT_SERVICE = "<magenta>{extra[service]}</magenta>"
LOG_FORMAT_JOB = "<cyan>{extra[job_id]: <16}</cyan>"
LOG_FORMAT_LOCATION = "<cyan>{name}</cyan>:<cyan>{line}</cyan>"
LOG_FORMAT_MESSAGE = "<level>{message}</level>"

JOB_ID_KEY = "job_id"
SERVICE_KEY = "service"
