"""Logging utilities for the Jira issue client.

All client modules log to one of two named loggers: ``jira-issue-client``
for application level messages and ``jira-issues`` for REST traffic.
"""

import logging

APP_LOGGER_NAME = "jira-issue-client"
CLIENT_LOGGER_NAME = "jira-issues"


def setup_logging(level: int = logging.WARNING) -> logging.Logger:
    """
    Configure client logging with a single stream handler.

    Args:
        level: The minimum logging level to display (default: WARNING)

    Returns:
        The configured application logger
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove existing handlers to prevent duplication
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(levelname)s - %(name)s - %(message)s")
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)

    for logger_name in (APP_LOGGER_NAME, CLIENT_LOGGER_NAME):
        logging.getLogger(logger_name).setLevel(level)

    return logging.getLogger(APP_LOGGER_NAME)


def mask_sensitive(value: str | None, keep_chars: int = 4) -> str:
    """Masks sensitive strings for logging.

    Args:
        value: The string to mask
        keep_chars: Number of characters to keep visible at start and end

    Returns:
        Masked string with most characters replaced by asterisks
    """
    if not value:
        return "Not Provided"
    if len(value) <= keep_chars * 2:
        return "*" * len(value)
    return f"{value[:keep_chars]}{'*' * (len(value) - keep_chars * 2)}{value[-keep_chars:]}"


def log_config_param(
    logger: logging.Logger,
    param: str,
    value: str | None,
    sensitive: bool = False,
) -> None:
    """Logs a Jira configuration parameter, masking it if sensitive."""
    display_value = mask_sensitive(value) if sensitive else (value or "Not Provided")
    logger.info(f"Jira {param}: {display_value}")
