# Logging setup shared by the API and the Streamlit front end
import logging

from weconvert.config.constants import LOG_LEVEL


def configure_logging(level: str = LOG_LEVEL) -> logging.Logger:
    """
    Configure and return a standard logger for the application.

    Args:
        level (str): Log level name, defaults to ``WECONVERT_LOG_LEVEL``

    Returns:
        logging.Logger: Configured logger instance
    """
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )
    return logging.getLogger("weconvert")
