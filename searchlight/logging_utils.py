"""
Logging setup for searchlight entry points.
"""
import logging
import sys
from typing import Optional, Union


def configure_logging(log_level: Union[int, str],
                      log_file: Optional[str] = None,
                      trace_mode: bool = False) -> logging.Logger:
    """
    Configure root logging handlers.

    Args:
        log_level: Numeric level or level name such as "INFO"
        log_file: Optional file to tee log output into
        trace_mode: Include timestamps and logger names in records

    Returns:
        The configured root logger
    """
    if isinstance(log_level, int):
        level = log_level
    else:
        level = getattr(logging, str(log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if trace_mode:
        formatter = logging.Formatter(
            "[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    else:
        formatter = logging.Formatter("%(levelname)s: %(message)s")

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(level)
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if log_file:
        try:
            file_handler = logging.FileHandler(log_file, mode="a", encoding="utf-8")
        except OSError as e:
            root_logger.warning("Could not create log file %s: %s", log_file, e)
        else:
            file_handler.setLevel(level)
            file_handler.setFormatter(formatter)
            root_logger.addHandler(file_handler)

    return root_logger
