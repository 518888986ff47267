import json
import logging
import os
from logging.handlers import RotatingFileHandler

ROOT_LOGGER_NAME = "awardodds"
DEFAULT_LOG_BACKUP_COUNT = 10
DEFAULT_RETENTION_BYTES = 5 * 1024 * 1024

_PLAIN_FORMAT = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class JsonFormatter(logging.Formatter):
    """One JSON object per record.

    Dict messages (the structured style used across the package) are embedded
    as-is under "msg"; anything else is rendered with getMessage().
    """

    def format(self, record: logging.LogRecord) -> str:
        if isinstance(record.msg, dict) and not record.args:
            msg = record.msg
        else:
            msg = record.getMessage()
        payload = {
            "ts": self.formatTime(record, _DATE_FORMAT),
            "level": record.levelname,
            "logger": record.name,
            "msg": msg,
        }
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def _make_formatter(json_logs: bool) -> logging.Formatter:
    if json_logs:
        return JsonFormatter()
    return logging.Formatter(_PLAIN_FORMAT, datefmt=_DATE_FORMAT)


def setup_logging(
    level="INFO",
    json_logs=False,
    log_dir=None,
    retention_bytes=DEFAULT_RETENTION_BYTES,
):
    logger = logging.getLogger(ROOT_LOGGER_NAME)
    logger.setLevel(level)
    # Re-running setup replaces handlers instead of stacking them.
    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = _make_formatter(json_logs)

    stream_handler = logging.StreamHandler()
    stream_handler.setFormatter(formatter)
    logger.addHandler(stream_handler)

    if log_dir:
        os.makedirs(log_dir, exist_ok=True)
        file_handler = RotatingFileHandler(
            os.path.join(log_dir, "awardodds.log"),
            maxBytes=retention_bytes,
            backupCount=DEFAULT_LOG_BACKUP_COUNT,
        )
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.propagate = False
    return logger
