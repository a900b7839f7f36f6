import os

TRUTHY = ("1", "true", "yes", "on")
FALSY = ("0", "false", "no", "off")
LOG_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def env_flag(name, default):
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    if value in TRUTHY:
        return True
    if value in FALSY:
        return False
    return default


def env_int(name, default=None):
    value = os.getenv(name)
    if not value:
        return default
    try:
        return int(value)
    except ValueError:
        return default


def env_log_level(name, default="INFO"):
    value = os.getenv(name, "").strip().upper()
    if value in LOG_LEVELS:
        return value
    return default


def load():
    """Read the service settings from the environment."""
    return {
        "HOST": os.getenv("SUBMITLOG_HOST", "0.0.0.0"),
        "PORT": env_int("SUBMITLOG_PORT", 8080),
        "DATA_FILE": os.getenv("SUBMITLOG_DATA_FILE", "data.txt"),
        "TIMESTAMPS": env_flag("SUBMITLOG_TIMESTAMPS", True),
        "DATA_ENDPOINT": env_flag("SUBMITLOG_DATA_ENDPOINT", True),
        "PREFLIGHT": env_flag("SUBMITLOG_PREFLIGHT", True),
        "MAX_CONTENT_LENGTH": env_int("SUBMITLOG_MAX_BODY"),
        "LOGGER_URL": os.getenv("LOGGER_URL") or None,
        "LOG_LEVEL": env_log_level("SUBMITLOG_LOG_LEVEL"),
    }
