import logging
import sys

# Library use: the package logger stays silent unless a tool configures it.
_rpncalc_root_logger = logging.getLogger("rpncalc")

if not _rpncalc_root_logger.hasHandlers():
    _rpncalc_root_logger.addHandler(logging.NullHandler())

CONSOLE_LOG_FORMAT = "%(levelname)s: %(message)s"
FILE_LOG_FORMAT = "%(asctime)-15s %(levelname)s %(name)s: %(message)s"
_logging_configured_by_tool = False


def _coerce_level(level):
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            _rpncalc_root_logger.warning("Invalid rpncalc log level string provided. Defaulting to WARNING.")
            level = logging.WARNING
    return level


def setup_console_logging(level=logging.WARNING, stream=sys.stderr, log_format=CONSOLE_LOG_FORMAT, logfile=None):
    """
    Configures logging for rpncalc command-line tools.

    Replaces the NullHandler on the 'rpncalc' package logger by a
    StreamHandler writing to stream. Calling it a second time is a no-op.

    Args:
        level: The minimum logging level, as int or level name.
        stream: The output stream (default: sys.stderr).
        log_format: The format string for log messages.
        logfile: If given, append log records to this file instead of
            writing them to stream.
    """
    global _logging_configured_by_tool
    if _logging_configured_by_tool:
        _rpncalc_root_logger.debug("Console logging already configured by tool. Skipping setup.")
        return

    package_logger = _rpncalc_root_logger
    level = _coerce_level(level)
    package_logger.setLevel(level)

    for handler in package_logger.handlers[:]:
        if isinstance(handler, logging.NullHandler):
            package_logger.removeHandler(handler)

    has_stream_handler = any(
        isinstance(h, logging.StreamHandler) and getattr(h, "stream", None) is stream
        for h in package_logger.handlers
    )
    if not has_stream_handler:
        if logfile:
            console_handler = logging.FileHandler(logfile, encoding="utf-8")
            log_format = FILE_LOG_FORMAT
        else:
            console_handler = logging.StreamHandler(stream)
        console_handler.setLevel(level)
        console_handler.setFormatter(logging.Formatter(log_format))
        package_logger.addHandler(console_handler)

    package_logger.propagate = False

    _logging_configured_by_tool = True
    package_logger.debug(f"rpncalc console logging configured by tool to level {logging.getLevelName(level)}.")


def reset_logging():
    """undo setup_console_logging, used by tests"""
    global _logging_configured_by_tool
    for handler in _rpncalc_root_logger.handlers[:]:
        _rpncalc_root_logger.removeHandler(handler)
        handler.close()
    _rpncalc_root_logger.addHandler(logging.NullHandler())
    _rpncalc_root_logger.setLevel(logging.NOTSET)
    _rpncalc_root_logger.propagate = True
    _logging_configured_by_tool = False
