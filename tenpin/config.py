import logging
import os

logger = logging.getLogger(__name__)

_LEVELS = ("CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG")


def _canon_level(env_var: str, default: str = "WARNING") -> str:
    """
    Normalize a log level name read from the environment:
      - defaults to ``default`` when unset/empty
      - case-insensitive, surrounding whitespace ignored
      - unknown names fall back to ``default`` with a warning
    """
    raw_value = os.getenv(env_var)
    val = (raw_value or "").strip().upper()
    if not val:
        return default
    if val not in _LEVELS:
        logger.warning(
            "%s is not a valid log level (got %r); defaulting to %s",
            env_var,
            raw_value,
            default,
        )
        return default
    return val


def configure_logging(level: str | None = None) -> None:
    """Attach a basic handler to the ``tenpin`` logger."""
    level = level or _canon_level("TENPIN_LOG_LEVEL")
    package_logger = logging.getLogger("tenpin")
    package_logger.setLevel(level)
    if not package_logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s %(name)s: %(message)s")
        )
        package_logger.addHandler(handler)
