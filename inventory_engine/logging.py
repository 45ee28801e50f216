import sys
from typing import Optional

from loguru import logger
from inventory_engine.config import get_config

LOG_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)


class AppLogger:
    """Owns the single loguru sink used by the inventory engine.

    The sink is installed on first use and replaced only when
    ``get_config().log_level`` changes, so sinks added by callers (for
    example a file sink in a deployment) survive repeated ``get_logger`` calls.
    """
    _handler_id: Optional[int] = None
    _level: Optional[str] = None

    @classmethod
    def configure(cls) -> None:
        level = get_config().log_level.upper()
        if cls._handler_id is not None and level == cls._level:
            return
        # None on first use also clears loguru's default handler; later calls replace only our sink
        logger.remove(cls._handler_id)
        cls._handler_id = logger.add(sink=sys.stderr, level=level, format=LOG_FORMAT)
        cls._level = level

    @classmethod
    def get_logger(cls, name: Optional[str] = None):
        """Get a logger with ``name`` bound into its extra fields.

        Args:
            name (str, optional): Name bound as ``extra["name"]``. Defaults to none.
        Returns:
            loguru.Logger: The configured logger instance.
        """
        cls.configure()
        if name:
            return logger.bind(name=name)
        return logger


def get_logger(name: str = None):
    """Get an application logger, reconfiguring the sink if the log level changed."""
    return AppLogger.get_logger(name)
