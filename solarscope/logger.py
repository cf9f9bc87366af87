"""
This file configures the logger for the analytics engine and its entry point.
"""

import logging


class ColoredFormatter(logging.Formatter):
    """
    Formatter that colors log lines according to their level.
    """

    COLORS = {
        "DEBUG": "\033[2;37m",  # Dim grey
        "INFO": "",
        "WARNING": "\033[33m",  # Yellow
        "ERROR": "\033[31m",  # Red
        "CRITICAL": "\033[1;31m",  # Bold Red
    }
    RESET = "\033[0m"

    def format(self, record):
        """
        Format the log record and wrap it in the color of its level.

        Args:
            record: The log record to format.

        Returns:
            str: The colored log message.
        """
        log_color = self.COLORS.get(record.levelname, self.RESET)
        message = super().format(record)
        return f"{log_color}{message}{self.RESET}"


def config_logger(debug: bool = False) -> None:
    """
    Install a single colored stream handler on the root logger.

    Args:
        debug (bool, optional): Log at DEBUG level instead of INFO. Defaults to False.
    """
    logger = logging.getLogger()

    # Replace handlers left over from a previous call
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(ColoredFormatter("[%(asctime)s] %(levelname)s: %(message)s"))

    logger.setLevel(logging.DEBUG if debug else logging.INFO)
    logger.addHandler(handler)
