"""Console logging setup for the command line tool."""

import json
import logging
import sys
import time

_LOGGER_NAME = "term_image_viewer"


class JsonFormatter(logging.Formatter):
    """One JSON object per record, carrying the optional ``event`` extra."""

    converter = time.gmtime

    def __init__(self):
        super().__init__(datefmt="%Y-%m-%dT%H:%M:%SZ")

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "time": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "name": record.name,
            "message": record.getMessage(),
        }
        event = getattr(record, "event", None)
        if event is not None:
            entry["event"] = event
        if record.exc_info:
            entry["traceback"] = self.formatException(record.exc_info)
        return json.dumps(entry)


def configure_logging(verbose: bool = False, json_format: bool = False) -> logging.Logger:
    """Attach a stderr handler to the package logger once."""
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    handler = logging.StreamHandler(sys.stderr)
    if json_format:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(levelname)s %(name)s: %(message)s"))
    logger.addHandler(handler)

    logger.debug("logging configured", extra={"event": "logging_configured"})
    return logger
