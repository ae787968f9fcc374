import logging
import sys

from pythonjsonlogger import jsonlogger

_LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"


def setup_logging(level: int = logging.INFO):
    """
    Configures structured JSON logging for the transcript pipeline.

    Installs a single stdout handler with a JSON formatter on the root logger
    and on the Uvicorn loggers, so request logs and pipeline stage logs share
    one format. trace_id and span_id are filled in by ddtrace log injection
    when tracing is active.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    formatter = jsonlogger.JsonFormatter(_LOG_FORMAT)
    stream_handler = logging.StreamHandler(sys.stdout)
    stream_handler.setFormatter(formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = []
    root_logger.addHandler(stream_handler)

    for logger_name in ["uvicorn", "uvicorn.access", "uvicorn.error"]:
        u_logger = logging.getLogger(logger_name)
        u_logger.setLevel(level)
        u_logger.handlers = []
        u_logger.addHandler(stream_handler)
        u_logger.propagate = False

    return root_logger
