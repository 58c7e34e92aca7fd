"""
Logging setup for the school demo.

Records are written to stderr, one per line, either as JSON objects or
as plain text. stdout belongs to the enrollment report printed by
school.main, so nothing here ever writes there.

Repository and database code attach entity ids through ``extra``:

    logger.info("Student enrolled", extra={"student_id": 1, "subject_id": 2})
"""

import json
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict, Optional, TextIO


PLAIN_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
PLAIN_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Attributes every LogRecord carries; anything else came from ``extra``
_RESERVED_ATTRS = frozenset({
    "name", "msg", "args", "created", "filename", "funcName",
    "levelname", "levelno", "lineno", "module", "msecs",
    "message", "pathname", "process", "processName", "relativeCreated",
    "thread", "threadName", "exc_info", "exc_text", "stack_info",
    "taskName",
})


class JSONFormatter(logging.Formatter):
    """
    Render a record as a single JSON line.

    Always present: ``timestamp`` (UTC, ISO 8601), ``level``, ``message``
    and ``logger``. A traceback lands in ``exception``. Ids passed via
    ``extra`` (``student_id``, ``subject_id``, ``database_url``) are
    copied to the top level unchanged.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "message": record.getMessage(),
            "logger": record.name,
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        if record.stack_info:
            log_data["stack_info"] = self.formatStack(record.stack_info)

        log_data.update(
            (key, value)
            for key, value in record.__dict__.items()
            if key not in _RESERVED_ATTRS and key not in log_data
        )

        # Datetimes (enrollment dates) and paths are stringified
        return json.dumps(log_data, default=str)


def setup_logging(
    level: str = "INFO",
    json_format: bool = True,
    stream: Optional[TextIO] = None,
) -> None:
    """
    Point the root logger at a single stderr handler.

    school.main calls this with the LOG_LEVEL and LOG_JSON settings
    before opening the database. Handlers left by an earlier call are
    removed, so repeated runs in one process do not duplicate lines.

    Args:
        level: Level name; unknown names fall back to INFO
        json_format: JSONFormatter when True, PLAIN_FORMAT otherwise
        stream: Handler target, mainly for tests; stderr when None
    """
    root_logger = logging.getLogger()
    log_level = getattr(logging, level.upper(), logging.INFO)
    root_logger.setLevel(log_level)

    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setLevel(log_level)
    if json_format:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=PLAIN_FORMAT, datefmt=PLAIN_DATE_FORMAT))
    root_logger.addHandler(handler)

    # SQL echo is opted into separately through SQL_ECHO / create_engine(echo=True)
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Module logger, e.g. ``get_logger(__name__)`` in school.repositories.school."""
    return logging.getLogger(name)
