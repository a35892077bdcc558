import sys
from loguru import logger


def setup_logging(level="INFO", show_time=True):
    """Configure loguru for the library.

    Parameters
    ----------
    level : str
        Logging level (DEBUG, INFO, SUCCESS, WARNING, ERROR, CRITICAL)
    show_time : bool
        Whether to show timestamps in the output.
    """
    # Remove default handler
    logger.remove()

    if show_time:
        log_format = (
            "<green>{time:YYYY-MM-DD HH:mm:ss.SSS}</green> | "
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
        )
    else:
        log_format = (
            "<level>{level: <8}</level> | "
            "<cyan>{name}</cyan> - <level>{message}</level>"
        )

    logger.add(sys.stderr, format=log_format, level=level, colorize=True)

    return logger


def capture_messages(level="DEBUG"):
    """Attach an in-memory sink and return (messages, handler_id).

    Used by the CLI and tests to inspect what the registry reported.
    Remove the sink with ``logger.remove(handler_id)``.
    """
    messages = []
    handler_id = logger.add(lambda msg: messages.append(msg.record["message"]),
                            level=level, format="{message}")
    return messages, handler_id
