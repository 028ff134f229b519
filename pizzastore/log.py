import logging
from logging.handlers import RotatingFileHandler
import os


def setup_logging(log_dir=None):
    # File log (absolute path, overridable through LOG_DIR)
    if not log_dir:
        log_dir = os.getenv("LOG_DIR") or os.path.join(
            os.path.dirname(os.path.abspath(__file__)), "logs"
        )
    os.makedirs(log_dir, exist_ok=True)
    log_file = os.path.join(log_dir, "app.log")

    log_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )

    app_logger = logging.getLogger()
    app_logger.setLevel(logging.INFO)

    # Console handler only for warnings, the menus own stdout
    if not any(type(h) is logging.StreamHandler for h in app_logger.handlers):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(log_formatter)
        app_logger.addHandler(console_handler)

    if not any(
        isinstance(h, RotatingFileHandler) and h.baseFilename == log_file
        for h in app_logger.handlers
    ):
        file_handler = RotatingFileHandler(
            log_file, maxBytes=10 * 1024 * 1024, backupCount=5
        )
        file_handler.setLevel(logging.INFO)
        file_handler.setFormatter(log_formatter)
        app_logger.addHandler(file_handler)

    # SQL echo from the engine stays out of app.log
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    return log_file
