import logging
import sys


def _logger(log_level: int) -> logging.Logger:
    # stderr keeps log lines out of the interactive prompts on stdout
    logging.basicConfig(
        level=log_level,
        format="%(asctime)s - %(filename)s - %(lineno)d - %(levelname)s - %(message)s",
        stream=sys.stderr,
    )
    return logging.getLogger("todoapp")


def set_level(log_level: int | str, *, logger: logging.Logger) -> None:
    """Set level of the logger"""
    logger.setLevel(log_level)


logger = _logger(log_level=logging.WARNING)
