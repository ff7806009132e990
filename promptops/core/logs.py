from .defaults import DEFAULT_LOG_LEVEL, DEFAULT_STORAGE_PATH
from loguru import logger
from pathlib import Path
import sys

LOGS_DIR = DEFAULT_STORAGE_PATH / "logs"
LOG_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function} | {message}"

def configure_logging(console_level :str=DEFAULT_LOG_LEVEL, logs_dir :Path=LOGS_DIR):
    """
    Send promptops records to stderr at `console_level` and to a daily DEBUG file.

    Only records emitted from the promptops package reach these sinks, so host
    applications keep control of their own loguru setup.
    """
    logs_dir.mkdir(exist_ok=True, parents=True)
    logger.remove()

    logger.add(sys.stderr, level=console_level, filter="promptops")

    # rotated at midnight, 5 days kept
    logger.add(
        logs_dir / "promptops_{time:YYYY-MM-DD}.log",
        level="DEBUG",
        filter="promptops",
        rotation="00:00",
        retention="5 days",
        enqueue=True,
        backtrace=True,
        diagnose=True,
        compression="zip",
        format=LOG_FORMAT
    )

configure_logging()
